from .exceptions import InvalidParameterError, IncompatibleSignalsError, EmptySignalError
from .DiscreteSignal import DiscreteSignal
from .DiscreteSpectrum import DiscreteSpectrum
from .ContinuousSignal import ContinuousSignal, Impulse, Step, Sinusoid, Cosine, ComplexExponential, Triangle, Square, Scale, Sum, Product, modulate, sample
from .FFT import forward, inverse
