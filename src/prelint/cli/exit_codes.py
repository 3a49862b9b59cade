"""CLI exit codes.

`prelint lint` returns the lint tool's own exit code when it runs.
"""

EXIT_SUCCESS = 0
EXIT_PLUGIN_ERROR = 2
EXIT_INVALID_USAGE = 3
