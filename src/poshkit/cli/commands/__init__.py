# topmark:header:start
#
#   project      : PoshKit
#   file         : __init__.py
#   file_relpath : src/poshkit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PoshKit subcommands."""
