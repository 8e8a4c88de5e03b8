# Node layout
NODE_SIZE = 64
CHAIN_SIZE = 32
KEY_SIZE = 32
HEX_NODE_LEN = NODE_SIZE * 2

# HMAC key for the master node: m = HMAC-SHA512(key=b"Symmetric key seed", msg=seed)
MASTER_NODE_KEY = b"Symmetric key seed"

# Prepended to every label: child = HMAC-SHA512(key=N[0:32], msg=b"\x00" || label)
LABEL_PREFIX = b"\x00"

# Path notation: m/"SLIP-0021"/"Master encryption key"
PATH_ROOT = "m"
PATH_SEPARATOR = "/"
