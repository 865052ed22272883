"""
Project constants definitions
"""
import re

# ============================================================
# URI Schemes
# ============================================================

SSH_URI_SCHEME = "ssh"
MOSH_URI_SCHEME = "mosh"

# ============================================================
# Default Values
# ============================================================

DEFAULT_SSH_PORT = 22
DEFAULT_MOSH_PORT_FROM = 60000
DEFAULT_MOSH_PORT_TO = 61000
MAX_PORT = 65535

# ============================================================
# Options
# ============================================================

# Lifted out of the option list into ConnectionInfo.identity_file
IDENTITY_FILE_OPTION_NAME = "IdentityFile"

# First entry is the one written by the encoder
MOSH_PORTS_PARAMETER_NAMES = ("mosh_ports", "mosh-ports")

MOSH_PORTS_RANGE_RE = re.compile(r"^(?P<from>\d{1,5})[:-](?P<to>\d{1,5})$")

# Separators used inside a URI
USERINFO_SEPARATOR = ";"
USERINFO_OPTION_SEPARATOR = ","
QUERY_OPTION_SEPARATOR = "&"

# ============================================================
# Executables
# ============================================================

MOSH_EXE = "mosh.exe"
MOSH_EXE_POSIX = "mosh"
SSH_EXE_POSIX = "ssh"
OPENSSH_RELATIVE_PATH = "OpenSSH\\ssh.exe"

# ============================================================
# Configuration
# ============================================================

ENV_PREFIX = "SSHLINK_"
SSH_CONFIG_PATH = "~/.ssh/config"
DEFAULT_CONFIG_PATH = "~/.sshlink/config.toml"
