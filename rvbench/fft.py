"""In-place radix-2 complex FFT on interleaved real/imaginary data."""

from __future__ import annotations

import math

PI = 3.1415926535897932


def _int_log2(n: int) -> int:
    log = 0
    k = 1
    while k < n:
        k *= 2
        log += 1
    if n != 1 << log:
        raise ValueError(f"FFT: Data length is not a power of 2!: {n}")
    return log


def num_flops(n: int) -> float:
    """Approximate floating point operation count of an ``n``-point FFT."""
    nd = float(n)
    log_n = float(_int_log2(n))
    return (5.0 * nd - 2) * log_n + 2 * (nd + 1)


def bitreverse(data: list[float]) -> None:
    """Reorder interleaved complex data into bit-reversed order, in place."""
    n = len(data) // 2
    j = 0
    for i in range(n - 1):
        ii = i << 1
        jj = j << 1
        k = n >> 1
        if i < j:
            data[ii], data[jj] = data[jj], data[ii]
            data[ii + 1], data[jj + 1] = data[jj + 1], data[ii + 1]
        while k <= j:
            j -= k
            k >>= 1
        j += k


def _transform_internal(data: list[float], direction: int) -> None:
    n = len(data) // 2
    if n == 1:
        return
    logn = _int_log2(n)
    bitreverse(data)

    dual = 1
    for _ in range(logn):
        w_real = 1.0
        w_imag = 0.0
        theta = 2.0 * direction * PI / (2.0 * float(dual))
        s = math.sin(theta)
        t = math.sin(theta / 2.0)
        s2 = 2.0 * t * t

        for b in range(0, n, 2 * dual):
            i = 2 * b
            j = 2 * (b + dual)
            wd_real = data[j]
            wd_imag = data[j + 1]
            data[j] = data[i] - wd_real
            data[j + 1] = data[i + 1] - wd_imag
            data[i] += wd_real
            data[i + 1] += wd_imag

        for a in range(1, dual):
            w_real, w_imag = (
                w_real - s * w_imag - s2 * w_real,
                w_imag + s * w_real - s2 * w_imag,
            )
            for b in range(0, n, 2 * dual):
                i = 2 * (b + a)
                j = 2 * (b + a + dual)
                z1_real = data[j]
                z1_imag = data[j + 1]
                wd_real = w_real * z1_real - w_imag * z1_imag
                wd_imag = w_real * z1_imag + w_imag * z1_real
                data[j] = data[i] - wd_real
                data[j + 1] = data[i + 1] - wd_imag
                data[i] += wd_real
                data[i + 1] += wd_imag
        dual *= 2


def transform(data: list[float]) -> None:
    """Forward transform of interleaved complex data, in place."""
    _transform_internal(data, -1)


def inverse(data: list[float]) -> None:
    """Normalised inverse transform of interleaved complex data, in place."""
    n = len(data) // 2
    _transform_internal(data, +1)
    norm = 1 / float(n)
    data[:] = [v * norm for v in data]