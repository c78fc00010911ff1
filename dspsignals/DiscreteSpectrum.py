import numpy as np
from .DiscreteSignal import check_sample_rate, as_complex_array
from .exceptions import EmptySignalError

class DiscreteSpectrum:
	"""Frequency domain representation of a `DiscreteSignal`, as produced
	by `dspsignals.FFT.forward`. Bin `k` of an `N` bins spectrum
	corresponds to frequency `k*sample_rate/N`; bins in the upper half
	represent the negative frequencies `(k-N)*sample_rate/N`.
	"""
	def __init__(self, bins, sample_rate: float):
		"""
		Arguments
		---------
		bins: array like
			Complex value of each frequency bin.
		sample_rate: float
			Sample rate of the time domain signal.
		"""
		self._sample_rate = check_sample_rate(sample_rate)
		self._bins = as_complex_array(bins, name='bins')

	@property
	def bins(self):
		"""Returns the (read only) array of bins."""
		return self._bins

	@property
	def sample_rate(self) -> float:
		return self._sample_rate

	@property
	def bin_spacing(self) -> float:
		"""Returns the frequency difference between consecutive bins."""
		if len(self) == 0:
			raise EmptySignalError('An empty spectrum has no bin spacing.')
		return self._sample_rate/len(self)

	@property
	def frequencies(self):
		"""Returns the frequency of each bin, in the same order as the bins."""
		n = len(self)
		k = np.arange(n)
		k = np.where(k < (n+1)//2, k, k-n)
		return k*self._sample_rate/n if n > 0 else np.zeros(0)

	@property
	def magnitudes(self):
		return np.abs(self._bins)

	@property
	def phases(self):
		"""Returns the phase of each bin in radians."""
		return np.angle(self._bins)

	def __len__(self):
		return len(self._bins)

	def __eq__(self, other):
		if not isinstance(other, DiscreteSpectrum):
			return NotImplemented
		return self._sample_rate == other._sample_rate and np.array_equal(self._bins, other._bins)

	__hash__ = None

	def __repr__(self):
		return f'DiscreteSpectrum(bins={self._bins!r}, sample_rate={self._sample_rate!r})'
