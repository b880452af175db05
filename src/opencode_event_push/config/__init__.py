"""
Package: config
Description: Runtime settings and target configuration loading.

settings holds the ambient knobs (file name, global directory, defaults);
loader reads the global and project config files and merges them.
"""
