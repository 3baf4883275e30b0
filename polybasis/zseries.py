"""z-series helpers for Chebyshev series.

A Chebyshev series c0*T0 + c1*T1 + ... + c(n-1)*T(n-1) can be written as a
Laurent series in z with T_k = (z**k + z**-k)/2.  The coefficients of that
Laurent series form a symmetric array of length 2n-1 (the "z-series"), and
products and quotients of Chebyshev series become ordinary convolution and
deconvolution of z-series.

Nothing in this module escapes the Chebyshev handler; all functions take and
return plain lists and never modify their arguments.
"""

def c_to_z(cs):
    """Halve every coefficient and mirror the result around the origin."""
    n = len(cs)
    if n == 0:
        return []
    half =[c / 2 for c in cs]
    zs = list(reversed(half[1:])) + half
    # The center is counted twice by the mirror image.
    zs[n - 1] = half[0] + half[0]
    return zs

def z_to_c(zs):
    """Inverse of `c_to_z`: take the upper half and double all but the center."""
    if not zs:
        return []
    n = (len(zs) + 1) // 2
    cs = list(zs[n - 1:])
    for i in range(1, n):
        cs[i] = cs[i] * 2
    return cs

def convolve(a, b):
    """Discrete convolution of two sequences (len(a) + len(b) - 1 entries)."""
    if not a or not b:
        return []
    res = [None] * (len(a) + len(b) - 1)
    for i, ai in enumerate(a):
        for j, bj in enumerate(b):
            k = i + j
            res[k] = ai * bj if res[k] is None else res[k] + ai * bj
    return res

def z_division(z1, z2):
    """Divide z-series z1 by z2.

    Returns (quotient, remainder), both z-series.  The division peels matching
    terms off both ends of the working copy at once, which keeps quotient and
    remainder symmetric.  `z2` must not be empty.
    """
    z1 = list(z1)
    z2 = list(z2)
    if len(z2) == 1:
        return [c / z2[0] for c in z1], []
    if len(z1) < len(z2):
        return [], z1
    dlen = len(z1) - len(z2)
    scl = z2[0]
    z2 = [c / scl for c in z2]
    quo = [None] * (dlen + 1)
    i = 0
    j = dlen
    while i < j:
        r = z1[i]
        quo[i] = r
        quo[dlen - i] = r
        tmp = [r * c for c in z2]
        for k in range(len(z2)):
            z1[i + k] -= tmp[k]
            z1[j + k] -= tmp[k]
        i += 1
        j -= 1
    r = z1[i]
    quo[i] = r
    for k in range(len(z2)):
        z1[i + k] -= r * z2[k]
    quo = [q / scl for q in quo]
    rem = z1[i + 1:i - 1 + len(z2)]
    return quo, rem
