from .BitBuffer import FixedBitBuffer
from .CryptoFunc import RoundMask
from .Parameters import ParameterSet


def Encrypt_internal(F: RoundMask, params: ParameterSet, T: bytes, X: FixedBitBuffer) -> FixedBitBuffer:
    """
    Encrypt(K, T, X) for method Left, paraphrased from the FFX draft:

        for i = 0 to rounds-1
            A = X[1 .. split(n)]
            B = X[split(n)+1 .. n]
            C = A xor F(n, T, i, B)
            X = B || C
        return X

    Args:
        F: The round function, keyed at engine construction.
        params: The ParameterSet of n = len(X).
        T: The tweak.
        X: The plaintext.

    Returns:
        The ciphertext, len(X) bits.
    """
    if len(X) != params.n:
        raise ValueError(f"Plaintext has {len(X)} bits, expected {params.n}.")

    for i in range(params.rounds):
        # Step 1: A is the split(n) bits to be transformed, B the remainder
        A = X.Slice(0, params.imbalance)
        B = X.Slice(params.imbalance, params.n)

        # Step 2: The mask comes from B but is as long as A
        C = A.Xor(F.Mask(T, B, params.imbalance))

        # Step 3: Reassemble for the next round
        X = B.Concat(C)

    return X


def Decrypt_internal(F: RoundMask, params: ParameterSet, T: bytes, Y: FixedBitBuffer) -> FixedBitBuffer:
    """
    Decrypt(K, T, Y) for method Left, paraphrased from the FFX draft:

        for i = rounds-1 downto 0
            B = Y[1 .. n-split(n)]
            C = Y[n-split(n)+1 .. n]
            A = C xor F(n, T, i, B)
            Y = A || B
        return Y

    Args:
        F: The round function, keyed at engine construction.
        params: The ParameterSet of n = len(Y).
        T: The tweak.
        Y: The ciphertext.

    Returns:
        The plaintext, len(Y) bits.
    """
    if len(Y) != params.n:
        raise ValueError(f"Ciphertext has {len(Y)} bits, expected {params.n}.")

    for i in range(params.rounds - 1, -1, -1):
        # Step 1: B leads the ciphertext now, C is the transformed half
        B = Y.Slice(0, params.remainder)
        C = Y.Slice(params.remainder, params.n)

        # Step 2: Same mask as Encrypt() - AES still runs forward
        A = C.Xor(F.Mask(T, B, params.imbalance))

        # Step 3: Reassemble for the next round
        Y = A.Concat(B)

    return Y
