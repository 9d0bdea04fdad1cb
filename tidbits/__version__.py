"""Version information for tidbits."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to helper signatures or return semantics
# MINOR: New helpers or strategies, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Selectable strategies and configuration
#         - flatten: worklist / recursive / concat strategies, optional depth limit
#         - deep_clone: recursive / json strategies, mapping subclasses keep their type
#         - ConfigService (logging settings) with YAML and TIDBITS_* env overrides
#         - configure_logging() helper
# 0.1.0 - Initial release
#         - count_by, cycle, deep_clone, flatten, Stack
