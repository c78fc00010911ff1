import numbers
import numpy as np
from scipy import interpolate
from .exceptions import InvalidParameterError, IncompatibleSignalsError, EmptySignalError

def check_sample_rate(sample_rate) -> float:
	"""Returns `sample_rate` as a float if it is a finite positive real
	number, otherwise raises."""
	if not isinstance(sample_rate, numbers.Real) or isinstance(sample_rate, bool):
		raise TypeError(f'`sample_rate` must be a real number, received object of type {type(sample_rate)}.')
	if not np.isfinite(sample_rate) or sample_rate <= 0:
		raise InvalidParameterError(f'`sample_rate` must be a finite positive number, received {sample_rate}.')
	return float(sample_rate)

def as_complex_array(values, name: str = 'samples'):
	"""Returns a read only one dimensional complex128 copy of `values`."""
	array = np.array(values, dtype=np.complex128)
	if array.ndim != 1:
		raise ValueError(f'`{name}` must be one dimensional, received an array with shape {array.shape}.')
	array.setflags(write=False)
	return array

class DiscreteSignal:
	"""A finite sequence of complex samples taken at a constant sample
	rate. Sample `i` corresponds to time `i/sample_rate`.

	Objects of this class are never modified: every operation returns
	a new `DiscreteSignal` (or a number) and the `samples` array is read
	only.
	"""
	def __init__(self, samples, sample_rate: float):
		"""Create a `DiscreteSignal` object.

		Arguments
		---------
		samples: array like
			The samples, complex or real. Real values get imaginary part 0.
		sample_rate: float
			Number of samples per unit time, must be positive.
		"""
		self._sample_rate = check_sample_rate(sample_rate)
		self._samples = as_complex_array(samples)

	@property
	def samples(self):
		"""Returns the (read only) array of samples."""
		return self._samples

	@property
	def sample_rate(self) -> float:
		return self._sample_rate

	@property
	def time(self):
		"""Returns the array of times of each sample."""
		return np.arange(len(self))/self._sample_rate

	@property
	def duration(self) -> float:
		"""Returns the time spanned by the signal, `len(self)/sample_rate`."""
		return len(self)/self._sample_rate

	def __len__(self):
		return len(self._samples)

	def __eq__(self, other):
		if not isinstance(other, DiscreteSignal):
			return NotImplemented
		return self._sample_rate == other._sample_rate and np.array_equal(self._samples, other._samples)

	__hash__ = None

	def __repr__(self):
		return f'DiscreteSignal(samples={self._samples!r}, sample_rate={self._sample_rate!r})'

	def __call__(self, time, interpolation='linear'):
		"""Returns the value of the signal at any time between the first
		and the last sample by interpolating the samples. `interpolation`
		is either `'linear'` or an integer with the spline order."""
		if interpolation == 'linear':
			kind = 'linear'
		elif isinstance(interpolation, int):
			kind = interpolation
		else:
			raise NotImplementedError(f'Interpolation {repr(interpolation)} not implemented.')
		real = interpolate.interp1d(self.time, self._samples.real, kind=kind)(time)
		imag = interpolate.interp1d(self.time, self._samples.imag, kind=kind)(time)
		value = real + 1j*imag
		return complex(value) if np.ndim(value) == 0 else value

	def get(self, i: int) -> complex:
		"""Returns sample `i`, or 0 if `i` is outside the signal."""
		if 0 <= i < len(self):
			return complex(self._samples[i])
		return complex(0)

	def to_list(self) -> list:
		"""Returns the samples as a list of Python complex numbers."""
		return [complex(x) for x in self._samples]

	def is_compatible(self, other) -> bool:
		"""Returns `True` if `other` is a `DiscreteSignal` with the same
		length and sample rate as this one."""
		return isinstance(other, DiscreteSignal) and len(self) == len(other) and self._sample_rate == other._sample_rate

	def _check_compatible(self, other):
		if not isinstance(other, DiscreteSignal):
			raise TypeError(f'`other` must be an instance of {repr(DiscreteSignal)}, received object of type {type(other)}.')
		if not self.is_compatible(other):
			raise IncompatibleSignalsError(f'Signals must have the same length and sample rate, received `len={len(self)}, sample_rate={self._sample_rate}` and `len={len(other)}, sample_rate={other._sample_rate}`.')

	def _new(self, samples):
		return DiscreteSignal(samples=samples, sample_rate=self._sample_rate)

	def shift(self, n: int):
		"""Returns the signal delayed by `n` samples, i.e.
		`y[i] = x[i-n]`. Negative `n` advances the signal. Positions
		that fall outside of the original signal are filled with zeros
		and the length is preserved.
		"""
		if not isinstance(n, numbers.Integral) or isinstance(n, bool):
			raise TypeError(f'`n` must be an integer, received object of type {type(n)}.')
		n = int(n)
		size = len(self)
		shifted = np.zeros(size, dtype=np.complex128)
		if abs(n) < size:
			if n >= 0:
				shifted[n:] = self._samples[:size-n]
			else:
				shifted[:size+n] = self._samples[-n:]
		return self._new(shifted)

	def scale(self, k: complex):
		"""Returns the signal with every sample multiplied by `k`."""
		if not isinstance(k, numbers.Number):
			raise TypeError(f'`k` must be a number, received object of type {type(k)}.')
		return self._new(self._samples*complex(k))

	def add(self, other):
		"""Returns the sample by sample sum with `other`, which must have
		the same length and sample rate."""
		self._check_compatible(other)
		return self._new(self._samples + other._samples)

	def multiply(self, other):
		"""Returns the sample by sample product with `other`, which must
		have the same length and sample rate."""
		self._check_compatible(other)
		return self._new(self._samples*other._samples)

	def integrate(self):
		"""Returns the running integral `y[i] = sum(x[:i+1])/sample_rate`."""
		return self._new(np.cumsum(self._samples)/self._sample_rate)

	def differentiate(self):
		"""Returns the first difference scaled by the sample rate,
		`y[i] = (x[i]-x[i-1])*sample_rate`. The sample before the first
		one is taken as 0, so `y[0] = x[0]*sample_rate` and
		`integrate` exactly undoes this operation.
		"""
		return self._new(np.diff(self._samples, prepend=0)*self._sample_rate)

	def energy(self) -> float:
		"""Returns the sum of the squared magnitude of the samples, 0 for
		an empty signal."""
		return float(np.sum(self._samples.real**2 + self._samples.imag**2))

	def power(self) -> float:
		"""Returns the energy divided by the duration. Raises
		`EmptySignalError` for an empty signal."""
		if len(self) == 0:
			raise EmptySignalError('Cannot compute the power of an empty signal, its duration is 0.')
		return self.energy()/self.duration

	def add_noise(self, std: float, rng=None):
		"""Returns the signal plus real gaussian noise.

		Arguments
		---------
		std: float
			Standard deviation of the noise, must be non negative.
		rng: numpy.random.Generator, optional
			Source of randomness, a new `numpy.random.default_rng()` if
			not given.
		"""
		if not isinstance(std, numbers.Real) or isinstance(std, bool):
			raise TypeError(f'`std` must be a real number, received object of type {type(std)}.')
		if not np.isfinite(std) or std < 0:
			raise InvalidParameterError(f'`std` must be a finite non negative number, received {std}.')
		if rng is None:
			rng = np.random.default_rng()
		return self._new(self._samples + rng.normal(0, std, size=len(self)))

	def __add__(self, other):
		if not isinstance(other, DiscreteSignal):
			return NotImplemented
		return self.add(other)

	def __sub__(self, other):
		if not isinstance(other, DiscreteSignal):
			return NotImplemented
		return self.add(other.scale(-1))

	def __mul__(self, other):
		if isinstance(other, DiscreteSignal):
			return self.multiply(other)
		if isinstance(other, numbers.Number):
			return self.scale(other)
		return NotImplemented

	def __rmul__(self, other):
		return self.__mul__(other)

	def __neg__(self):
		return self.scale(-1)
