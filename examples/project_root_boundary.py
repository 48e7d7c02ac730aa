"""Stop the search at the project root instead of the home directory.

find_project_root() walks up to the nearest directory containing .git,
.hg or pyproject.toml. Configuration above that directory is ignored.
"""

from configseek import create_explorer, find_project_root


root = find_project_root()
print(f"Project root: {root}")

explorer = create_explorer("mytool", sync=True, stop_dir=root)
result = explorer.load(".")
print(result)
