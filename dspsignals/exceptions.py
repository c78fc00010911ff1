class InvalidParameterError(ValueError):
	"""Raised when a scalar argument is out of its domain, e.g. a 
	non positive sample rate or a negative duration."""
	pass

class IncompatibleSignalsError(ValueError):
	"""Raised when a binary operation receives two discrete signals 
	that do not share the same length and sample rate."""
	pass

class EmptySignalError(ZeroDivisionError):
	"""Raised when a quantity that is normalized by the number of 
	samples, such as the power, is requested for an empty signal."""
	pass
