import numbers
import warnings
import numpy as np
from .DiscreteSignal import DiscreteSignal, check_sample_rate
from .exceptions import InvalidParameterError

# `duration*sample_rate` closer than this (relative) to an integer is snapped to it before flooring.
SAMPLES_COUNT_RELATIVE_TOLERANCE = 1e-9

def _check_real(name: str, value) -> float:
	if not isinstance(value, numbers.Real) or isinstance(value, bool):
		raise TypeError(f'`{name}` must be a real number, received object of type {type(value)}.')
	if not np.isfinite(value):
		raise InvalidParameterError(f'`{name}` must be finite, received {value}.')
	return float(value)

def _check_signal(name: str, value):
	if not isinstance(value, ContinuousSignal):
		raise TypeError(f'`{name}` must be an instance of {repr(ContinuousSignal)}, received object of type {type(value)}.')
	return value

class ContinuousSignal:
	"""A signal defined for every time `t` as a pure function
	`t -> complex`. Instances hold no mutable state, so they can be
	evaluated any number of times, in any order and from any thread.

	The set of signals is closed: `Impulse`, `Step`, `Sinusoid`,
	`Cosine`, `ComplexExponential`, `Triangle`, `Square` and the
	combinators `Scale`, `Sum` and `Product`. Combinators are usually
	built with the arithmetic operators, e.g. `2*Step() + Impulse()`.
	"""
	def __call__(self, t: float) -> complex:
		"""Returns the value of the signal at time `t`."""
		raise NotImplementedError(f'{type(self).__name__} does not implement evaluation.')

	def evaluate(self, t: float) -> complex:
		"""Same as `self(t)`."""
		return self(t)

	@property
	def highest_frequency(self) -> float:
		"""Highest fundamental frequency present in the signal, 0 for
		non periodic signals. Used to detect aliasing when sampling."""
		return 0.

	def sample(self, sample_rate: float, duration: float):
		"""Same as `sample(self, sample_rate, duration)`."""
		return sample(self, sample_rate, duration)

	def __add__(self, other):
		if not isinstance(other, ContinuousSignal):
			return NotImplemented
		return Sum(self, other)

	def __sub__(self, other):
		if not isinstance(other, ContinuousSignal):
			return NotImplemented
		return Sum(self, Scale(other, -1))

	def __mul__(self, other):
		if isinstance(other, ContinuousSignal):
			return Product(self, other)
		if isinstance(other, numbers.Number):
			return Scale(self, other)
		return NotImplemented

	def __rmul__(self, other):
		return self.__mul__(other)

	def __neg__(self):
		return Scale(self, -1)

class Impulse(ContinuousSignal):
	"""Unit impulse, 1 at `t == 0` and 0 elsewhere."""
	def __call__(self, t: float) -> complex:
		return complex(1) if t == 0 else complex(0)

class Step(ContinuousSignal):
	"""Unit step, 0 for `t < 0` and 1 for `t >= 0`."""
	def __call__(self, t: float) -> complex:
		return complex(1) if t >= 0 else complex(0)

class _Periodic(ContinuousSignal):
	def __init__(self, frequency: float, amplitude: float = 1, phase: float = 0):
		"""
		Arguments
		---------
		frequency: float
			Frequency in cycles per unit time.
		amplitude: float, default `1`
			Peak value of the waveform.
		phase: float, default `0`
			Phase offset in radians.
		"""
		self._frequency = _check_real('frequency', frequency)
		self._amplitude = _check_real('amplitude', amplitude)
		self._phase = _check_real('phase', phase)

	@property
	def frequency(self) -> float:
		return self._frequency

	@property
	def amplitude(self) -> float:
		return self._amplitude

	@property
	def phase(self) -> float:
		return self._phase

	@property
	def highest_frequency(self) -> float:
		return abs(self._frequency)

	def _angle(self, t: float) -> float:
		return 2*np.pi*self._frequency*t + self._phase

class Sinusoid(_Periodic):
	"""Real sine wave `amplitude*sin(2*pi*frequency*t + phase)`."""
	def __call__(self, t: float) -> complex:
		return complex(self._amplitude*np.sin(self._angle(t)))

class Cosine(_Periodic):
	"""Real cosine wave `amplitude*cos(2*pi*frequency*t + phase)`."""
	def __call__(self, t: float) -> complex:
		return complex(self._amplitude*np.cos(self._angle(t)))

class ComplexExponential(_Periodic):
	"""Complex sinusoid `amplitude*exp(1j*(2*pi*frequency*t + phase))`,
	i.e. a phasor rotating counterclockwise for positive frequencies."""
	def __call__(self, t: float) -> complex:
		return complex(self._amplitude*np.exp(1j*self._angle(t)))

class Triangle(_Periodic):
	"""Real triangle wave with period `1/frequency`, rising through 0
	at `t = 0` and peaking at `amplitude` a quarter period later."""
	def __call__(self, t: float) -> complex:
		cycles = self._frequency*t + self._phase/(2*np.pi)
		return complex(self._amplitude*(1 - 4*abs((cycles + .25)%1 - .5)))

class Square(_Periodic):
	"""Real square wave with period `1/frequency`, equal to `amplitude`
	during the first half of each period and `-amplitude` during the
	second half."""
	def __call__(self, t: float) -> complex:
		cycles = self._frequency*t + self._phase/(2*np.pi)
		return complex(self._amplitude if cycles%1 < .5 else -self._amplitude)

class Scale(ContinuousSignal):
	"""`inner(t)*factor` for a complex `factor`."""
	def __init__(self, inner: ContinuousSignal, factor: complex):
		self._inner = _check_signal('inner', inner)
		if not isinstance(factor, numbers.Number):
			raise TypeError(f'`factor` must be a number, received object of type {type(factor)}.')
		self._factor = complex(factor)

	@property
	def inner(self) -> ContinuousSignal:
		return self._inner

	@property
	def factor(self) -> complex:
		return self._factor

	@property
	def highest_frequency(self) -> float:
		return self._inner.highest_frequency

	def __call__(self, t: float) -> complex:
		return self._inner(t)*self._factor

class Sum(ContinuousSignal):
	"""`left(t) + right(t)`."""
	def __init__(self, left: ContinuousSignal, right: ContinuousSignal):
		self._left = _check_signal('left', left)
		self._right = _check_signal('right', right)

	@property
	def left(self) -> ContinuousSignal:
		return self._left

	@property
	def right(self) -> ContinuousSignal:
		return self._right

	@property
	def highest_frequency(self) -> float:
		return max(self._left.highest_frequency, self._right.highest_frequency)

	def __call__(self, t: float) -> complex:
		return self._left(t) + self._right(t)

class Product(ContinuousSignal):
	"""`signal(t)*carrier(t)`, i.e. `signal` modulating `carrier`."""
	def __init__(self, signal: ContinuousSignal, carrier: ContinuousSignal):
		self._signal = _check_signal('signal', signal)
		self._carrier = _check_signal('carrier', carrier)

	@property
	def signal(self) -> ContinuousSignal:
		return self._signal

	@property
	def carrier(self) -> ContinuousSignal:
		return self._carrier

	@property
	def highest_frequency(self) -> float:
		# Mixing produces the sum of both frequencies.
		return self._signal.highest_frequency + self._carrier.highest_frequency

	def __call__(self, t: float) -> complex:
		return self._signal(t)*self._carrier(t)

def modulate(signal: ContinuousSignal, carrier: ContinuousSignal) -> Product:
	"""Returns `signal` modulated by `carrier`."""
	return Product(signal, carrier)

def number_of_samples(sample_rate: float, duration: float) -> int:
	"""Returns `floor(duration*sample_rate)`, treating products that
	differ from an integer only by rounding error as that integer."""
	check_sample_rate(sample_rate)
	if not isinstance(duration, numbers.Real) or isinstance(duration, bool):
		raise TypeError(f'`duration` must be a real number, received object of type {type(duration)}.')
	if not np.isfinite(duration) or duration < 0:
		raise InvalidParameterError(f'`duration` must be a finite non negative number, received {duration}.')
	n = duration*sample_rate
	if np.isclose(n, round(n), rtol=SAMPLES_COUNT_RELATIVE_TOLERANCE, atol=0):
		return int(round(n))
	return int(np.floor(n))

def sample(signal: ContinuousSignal, sample_rate: float, duration: float) -> DiscreteSignal:
	"""Samples `signal` at times `0, 1/sample_rate, 2/sample_rate, ...`
	producing `floor(duration*sample_rate)` samples.

	Arguments
	---------
	signal: ContinuousSignal
		The signal to sample.
	sample_rate: float
		Samples per unit time, must be positive.
	duration: float
		Time span to sample, must be non negative. A duration of 0
		produces an empty `DiscreteSignal`.
	"""
	_check_signal('signal', signal)
	n_samples = number_of_samples(sample_rate, duration)
	nyquist = sample_rate/2
	if n_samples > 0 and signal.highest_frequency >= nyquist:
		warnings.warn(f'Sampling a signal with frequency {signal.highest_frequency} at `sample_rate={sample_rate}`, which is at or above the Nyquist frequency {nyquist}. The samples will be aliased.')
	samples = np.array([signal(i/sample_rate) for i in range(n_samples)], dtype=np.complex128)
	return DiscreteSignal(samples=samples, sample_rate=sample_rate)
