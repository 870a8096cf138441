import logging
import os
import sys
import time
from .FF1_LS80 import FF1LS80
from .Errors import FF1Error, RegisterResult

DEMO_KEY = "0102030405060708090A0B0C0D0E0F16"
DEMO_N = 104                                # ADS-B 1090ES is 112 bits, 8 of which feed the tweak
DEMO_PRE_TWEAK = 0x57                       # first 8 bits of the extended squitter
DEMO_MESSAGE = "0102030405060708090A0B0C13"


def make_tweak(preTweak: int) -> bytes:
    """
    Repeats one byte of the unencrypted message 16 times to form the tweak.
    The tweak must be a repeatable function of public message content.
    """
    return bytes([preTweak]) * 16


def run_Demo() -> int:
    """
    Encrypts and decrypts one simulated message and prints every stage.

    Returns:
        A process exit code: 0 on success, 2 for a bad size, 3/4 for a failed Encrypt/Decrypt.
    """
    FFXADSB = FF1LS80(DEMO_KEY)

    rc = FFXADSB.registerLength(DEMO_N)
    if rc == RegisterResult.INVALID_LENGTH:
        return 2

    # Duplicate and out-of-range sizes are reported and ignored
    FFXADSB.registerLength(DEMO_N)
    FFXADSB.registerLength(DEMO_N + 1)

    Tweak = make_tweak(DEMO_PRE_TWEAK)
    Xi = FFXADSB.hexToBytes(DEMO_MESSAGE)
    print("Xi:    " + FFXADSB.bytesToHex(Xi))

    try:
        Xo = FFXADSB.Encrypt(Tweak, Xi)
    except FF1Error as e:
        print(f"❌ Encrypt failed: {e}")
        return 3
    print("Xo/Yi: " + FFXADSB.bytesToHex(Xo))

    try:
        Yo = FFXADSB.Decrypt(Tweak, Xo)
    except FF1Error as e:
        print(f"❌ Decrypt failed: {e}")
        return 4
    print("Yo:    " + FFXADSB.bytesToHex(Yo))

    assert Yo == Xi
    print("\n✅ Success! The decrypted message matches the input.")
    return 0


def run_Benchmark(n: int, size: int = DEMO_N):
    """Times Encrypt()/Decrypt() of random messages of `size` bits over n rounds."""
    FFXADSB = FF1LS80(DEMO_KEY)
    FFXADSB.registerLength(size)

    # Skip first time run to avoid numba compilation time
    Tweak = os.urandom(16)
    FFXADSB.Decrypt(Tweak, FFXADSB.Encrypt(Tweak, os.urandom(size // 8)))

    encrypt_total_elapsed = 0.0
    decrypt_total_elapsed = 0.0

    for i in range(n):
        Tweak = os.urandom(16)
        Xi = os.urandom(size // 8)

        encrypt_start = time.perf_counter()
        Xo = FFXADSB.Encrypt(Tweak, Xi)
        encrypt_end = time.perf_counter()
        encrypt_total_elapsed += encrypt_end - encrypt_start

        decrypt_start = time.perf_counter()
        Yo = FFXADSB.Decrypt(Tweak, Xo)
        decrypt_end = time.perf_counter()
        decrypt_total_elapsed += decrypt_end - decrypt_start

        assert Yo == Xi

    print(f"Encrypt() took averagely {encrypt_total_elapsed / n * 1000:.6f} ms to execute.")
    print(f"Decrypt() took averagely {decrypt_total_elapsed / n * 1000:.6f} ms to execute.")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    if len(sys.argv) > 1 and sys.argv[1] == "bench":
        run_Benchmark(n=int(sys.argv[2]) if len(sys.argv) > 2 else 100)
        return 0
    return run_Demo()


if __name__ == "__main__":
    sys.exit(main())
