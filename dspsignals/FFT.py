"""Fast Fourier transform between `DiscreteSignal` and `DiscreteSpectrum`.

Lengths that are a power of two are transformed with an iterative radix-2
Cooley-Tukey algorithm. Any other length is handled with Bluestein's
algorithm, which writes the transform as a convolution and evaluates it
with radix-2 transforms of a larger power of two size. Both run in
`O(N log N)`, so every length is accepted.
"""

import numpy as np
from .DiscreteSignal import DiscreteSignal, check_sample_rate
from .DiscreteSpectrum import DiscreteSpectrum

def is_power_of_two(n: int) -> bool:
	return n > 0 and n & (n-1) == 0

def _bit_reversed_indices(n: int):
	bits = n.bit_length() - 1
	indices = np.arange(n)
	reversed_indices = np.zeros(n, dtype=int)
	for b in range(bits):
		reversed_indices |= ((indices >> b) & 1) << (bits-1-b)
	return reversed_indices

def _radix2(x, sign: int):
	"""Unnormalized DFT of `x` with kernel `exp(sign*2j*pi*k*n/N)`,
	`len(x)` must be a power of two."""
	n = len(x)
	x = x[_bit_reversed_indices(n)]
	size = 2
	while size <= n:
		half = size//2
		twiddles = np.exp(sign*2j*np.pi*np.arange(half)/size)
		blocks = x.reshape(-1, size)
		even = blocks[:, :half]
		odd = blocks[:, half:]*twiddles
		x = np.concatenate([even + odd, even - odd], axis=1).reshape(-1)
		size *= 2
	return x

def _bluestein(x, sign: int):
	"""Unnormalized DFT of `x` of any length, see `_radix2`."""
	n = len(x)
	k = np.arange(n)
	# k**2 modulo 2n keeps the chirp argument small without changing its value.
	chirp = np.exp(sign*1j*np.pi*((k*k) % (2*n))/n)
	m = 1 << (2*n - 2).bit_length()
	a = np.zeros(m, dtype=np.complex128)
	a[:n] = x*chirp
	b = np.zeros(m, dtype=np.complex128)
	b[:n] = np.conj(chirp)
	b[m-n+1:] = np.conj(chirp[1:])[::-1]
	convolution = _radix2(_radix2(a, -1)*_radix2(b, -1), +1)/m
	return chirp*convolution[:n]

def _transform(x, sign: int):
	n = len(x)
	if n <= 1:
		return x.copy()
	if is_power_of_two(n):
		return _radix2(x, sign)
	return _bluestein(x, sign)

def forward(signal: DiscreteSignal) -> DiscreteSpectrum:
	"""Returns the discrete Fourier transform of `signal`,
	`X[k] = sum(x[n]*exp(-2j*pi*k*n/N))`."""
	if not isinstance(signal, DiscreteSignal):
		raise TypeError(f'`signal` must be an instance of {repr(DiscreteSignal)}, received object of type {type(signal)}.')
	return DiscreteSpectrum(
		bins = _transform(signal.samples, -1),
		sample_rate = signal.sample_rate,
	)

def inverse(spectrum: DiscreteSpectrum, sample_rate: float = None) -> DiscreteSignal:
	"""Returns the signal whose transform is `spectrum`, i.e. the inverse
	transform divided by the number of bins. The sample rate of the
	spectrum is used unless `sample_rate` is given."""
	if not isinstance(spectrum, DiscreteSpectrum):
		raise TypeError(f'`spectrum` must be an instance of {repr(DiscreteSpectrum)}, received object of type {type(spectrum)}.')
	sample_rate = spectrum.sample_rate if sample_rate is None else check_sample_rate(sample_rate)
	n = len(spectrum)
	samples = _transform(spectrum.bins, +1)
	return DiscreteSignal(
		samples = samples/n if n > 0 else samples,
		sample_rate = sample_rate,
	)
