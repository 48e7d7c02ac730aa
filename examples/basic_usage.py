"""Basic usage: find a tool's configuration from the current directory.

Searches upward from the working directory for, in each directory:
1. [tool.mytool] in pyproject.toml
2. .mytoolrc (YAML or JSON)
3. mytool.config.py (defines `config`)
"""

from configseek import create_explorer


explorer = create_explorer("mytool", sync=True)

result = explorer.load(".")
if result is None:
    print("No configuration found, using defaults")
else:
    print(f"Loaded {result.filepath}")
    print(result.config)
