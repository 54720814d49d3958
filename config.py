"""
Central configuration for caesar-enigma chat.
Avoids hardcoded literals spread across files.
"""

# Networking
HOST = "127.0.0.1"
PORT = 6666
BACKLOG = 1
RECV_BYTES = 4096

# Encoding
ENCODING = "utf-8"
ENCODING_ERRORS = "replace"  # errors handling during decode

# Session
CLOSE_COMMAND = "BYE"

# Logging
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
TRANSCRIPT_FORMAT = '%(message)s'
TIMESTAMP_FORMAT = "[%Y-%m-%d %H:%M:%S]"
