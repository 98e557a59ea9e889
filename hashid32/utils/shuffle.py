def consistent_shuffle(alphabet: str, salt: str) -> str:
    """Deterministically permute alphabet, keyed on the character codes of salt.

    A blank salt leaves the alphabet as it is. The same (alphabet, salt) pair
    always produces the same permutation.
    """
    if not salt or not salt.strip():
        return alphabet

    chars = list(alphabet)
    v = p = 0
    for i in range(len(chars) - 1, 0, -1):
        v %= len(salt)
        n = ord(salt[v])
        p += n
        j = (n + v + p) % i
        chars[i], chars[j] = chars[j], chars[i]
        v += 1

    return ''.join(chars)
