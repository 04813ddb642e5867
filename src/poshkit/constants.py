# topmark:header:start
#
#   project      : PoshKit
#   file         : constants.py
#   file_relpath : src/poshkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PoshKit Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    POSHKIT_VERSION: str = get_version("poshkit")
except PackageNotFoundError:  # running from a source checkout
    POSHKIT_VERSION = "0.0.0"

# Module whose import statement is managed in the profile scripts.
DEFAULT_MODULE_NAME: str = "posh-git"
DEFAULT_IMPORT_MARKER: str = "posh-git"

# Manifest file extension of a PowerShell module.
MODULE_MANIFEST_SUFFIX: str = ".psd1"

# Leaf directory name that marks a development checkout of the module.
SOURCE_DIR_NAME: str = "src"

# PowerShell profile script file names.
CURRENT_HOST_PROFILE_NAME: str = "Microsoft.PowerShell_profile.ps1"
ALL_HOSTS_PROFILE_NAME: str = "profile.ps1"

# Authenticode signature block written by Set-AuthenticodeSignature.
SIGNATURE_BLOCK_START: str = "# SIG # Begin signature block"
SIGNATURE_BLOCK_END: str = "# SIG # End signature block"

# Environment variables
ENV_MODULE_PATH: str = "PSModulePath"
ENV_PSHOME: str = "PSHOME"
ENV_SSH_CONNECTION: str = "SSH_CONNECTION"
ENV_LOG_LEVEL: str = "POSHKIT_LOG_LEVEL"

# Configuration files
CONFIG_FILE_NAME: str = "poshkit.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: str = "tool.poshkit"

DEFAULT_ERROR_BUFFER_CAPACITY: int = 64

VALUE_NOT_SET: str = "<not set>"
