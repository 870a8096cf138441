# REF: http://csrc.nist.gov/groups/ST/toolkit/BCM/documents/proposedmodes/ffx/ffx-spec.pdf
# REF: https://nvlpubs.nist.gov/nistpubs/SpecialPublications/NIST.SP.800-38G.pdf

# FF1 with a custom 80-bit split(), Feistel method Left, for ADS-B sized messages.

METHOD_LEFT         = 1     # unbalanced
METHOD_RIGHT        = 2     # balanced (parameter set A2), not implemented

ADDITION_BITWISE    = 0     # XOR in radix 2
ADDITION_BLOCKWISE  = 1     # not implemented

NUMBA_BITS          = 0
NUMPY_BITS          = 1

METHOD      = METHOD_LEFT
ADDITION    = ADDITION_BITWISE
BIT_BACKEND = NUMBA_BITS


"""
    --- FF1-L-S80 constants (AES-128) ---

    Symbol set                        {0, 1}
    Remainder n - split(n) (bits)     80
    Minimum message size (bits)       88
    Tweak size (bytes)                16
    Key size (bytes)                  16
"""
RADIX               = 2
BYTE_BITS           = 8
SPLIT_OFFSET        = 80
MIN_MESSAGE_BITS    = SPLIT_OFFSET + BYTE_BITS
BLOCK_BYTES         = 16
KEY_BYTES           = 16
KEY_HEX_DIGITS      = 2 * KEY_BYTES


if METHOD != METHOD_LEFT:
    raise Exception("ONLY FEISTEL METHOD LEFT IS SUPPORTED")

if ADDITION != ADDITION_BITWISE:
    raise Exception("ONLY BITWISE ADDITION IS SUPPORTED")

if BIT_BACKEND not in (NUMBA_BITS, NUMPY_BITS):
    raise Exception("PLEASE DEFINE BIT PACKING BACKEND")
