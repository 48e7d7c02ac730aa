"""Error handling: a missing source is None, a broken one raises.

All library errors inherit from ConfigseekError and carry a
recovery_hint with guidance for the user.
"""

from configseek import ConfigParseError, ConfigseekError, create_explorer


explorer = create_explorer("mytool", sync=True, rc_extensions=True)

try:
    result = explorer.load(".")
except ConfigParseError as e:
    print(f"Broken config file: {e.filepath}")
    print(f"Hint: {e.recovery_hint}")
except ConfigseekError as e:
    print(f"Error: {e}")
    if e.recovery_hint:
        print(f"Hint: {e.recovery_hint}")
else:
    print(result)

# After fixing the file, caches can be dropped explicitly.
explorer.clear_caches()
