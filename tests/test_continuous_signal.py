import warnings

import numpy as np
import pytest
from numpy.testing import assert_allclose

from dspsignals import (
	ComplexExponential,
	Cosine,
	DiscreteSignal,
	Impulse,
	InvalidParameterError,
	Product,
	Scale,
	Sinusoid,
	Square,
	Step,
	Sum,
	Triangle,
	modulate,
	sample,
)
from dspsignals.ContinuousSignal import number_of_samples


def test_impulse() -> None:
	signal = Impulse()
	assert signal(-4.) == 0
	assert signal(0.) == 1
	assert signal(42.) == 0
	assert isinstance(signal(0.), complex)


def test_step() -> None:
	signal = Step()
	assert signal(-1e-9) == 0
	assert signal(0.) == 1
	assert signal(42.) == 1


def test_periodic_waveforms() -> None:
	assert_allclose(Sinusoid(frequency=1)(.25), 1, atol=1e-12)
	assert_allclose(Sinusoid(frequency=1, amplitude=3, phase=np.pi/2)(0), 3, atol=1e-12)
	assert Sinusoid(frequency=1)(.25).imag == 0
	assert_allclose(Cosine(frequency=2)(0), 1)
	assert_allclose(Cosine(frequency=2)(.25), -1, atol=1e-12)
	assert_allclose(ComplexExponential(frequency=1)(.25), 1j, atol=1e-12)
	assert_allclose(abs(ComplexExponential(frequency=3, amplitude=2)(.123)), 2)


def test_triangle() -> None:
	signal = Triangle(frequency=1)
	assert_allclose(signal(0), 0, atol=1e-12)
	assert_allclose(signal(.25), 1, atol=1e-12)
	assert_allclose(signal(.5), 0, atol=1e-12)
	assert_allclose(signal(.75), -1, atol=1e-12)
	assert_allclose(signal(1.125), .5, atol=1e-12)


def test_square() -> None:
	signal = Square(frequency=2, amplitude=3)
	assert signal(0) == 3
	assert signal(.1) == 3
	assert signal(.3) == -3
	assert signal(.6) == 3


def test_scale() -> None:
	signal = Scale(Impulse(), 5+3j)
	assert signal(-4.) == 0
	assert signal(0.) == 5+3j
	assert signal(42.) == 0


def test_sum() -> None:
	signal = Sum(Impulse(), Step())
	assert signal(-4.) == 0
	assert signal(0.) == 2
	assert signal(42.) == 1


def test_product_modulates_carrier() -> None:
	signal = modulate(Step(), Cosine(frequency=1))
	assert isinstance(signal, Product)
	assert signal(-.5) == 0
	assert_allclose(signal(0), 1)
	assert_allclose(signal(.5), -1, atol=1e-12)


def test_operators_build_combinators() -> None:
	assert isinstance(Step() + Impulse(), Sum)
	assert isinstance(2*Step(), Scale)
	assert isinstance(Step()*2j, Scale)
	assert isinstance(Step()*Impulse(), Product)
	assert (2*Step() + Impulse())(0) == 3
	assert (-Step())(1) == -1
	assert (Step() - Step())(1) == 0
	assert Step().evaluate(1) == Step()(1)


def test_combinators_reject_non_signals() -> None:
	with pytest.raises(TypeError):
		Sum(Step(), 3)
	with pytest.raises(TypeError):
		Scale(Step(), 'a')
	with pytest.raises(TypeError):
		Step() + 1


@pytest.mark.parametrize('kwargs', [
	dict(frequency=float('nan')),
	dict(frequency=1, amplitude=float('inf')),
	dict(frequency=1, phase=float('nan')),
])
def test_invalid_periodic_parameters(kwargs) -> None:
	with pytest.raises(InvalidParameterError):
		Sinusoid(**kwargs)


def test_sample_impulse() -> None:
	signal = sample(Impulse(), sample_rate=8, duration=1)
	assert isinstance(signal, DiscreteSignal)
	assert signal == DiscreteSignal([1, 0, 0, 0, 0, 0, 0, 0], sample_rate=8)


def test_sample_step() -> None:
	signal = Step().sample(sample_rate=4, duration=1)
	assert signal.to_list() == [1, 1, 1, 1]
	assert signal.sample_rate == 4
	assert_allclose(signal.time, [0, .25, .5, .75])


def test_sample_sinusoid_cancels_with_its_negative() -> None:
	signal = sample(Sinusoid(frequency=1, amplitude=1, phase=0), sample_rate=8, duration=1)
	assert len(signal) == 8
	assert_allclose(signal.samples, np.sin(2*np.pi*np.arange(8)/8), atol=1e-12)
	assert np.all(signal.samples.imag == 0)
	assert signal.add(signal.scale(-1)) == DiscreteSignal(np.zeros(8), sample_rate=8)


def test_sample_floors_number_of_samples() -> None:
	assert len(sample(Step(), sample_rate=4, duration=.9)) == 3
	assert number_of_samples(sample_rate=100, duration=.29) == 29
	assert number_of_samples(sample_rate=10, duration=.7) == 7


def test_sample_zero_duration_is_empty() -> None:
	signal = sample(Sinusoid(frequency=1), sample_rate=8, duration=0)
	assert len(signal) == 0
	assert signal.energy() == 0


@pytest.mark.parametrize('sample_rate,duration', [
	(0, 1),
	(-8, 1),
	(float('inf'), 1),
	(8, -1),
	(8, float('nan')),
])
def test_sample_invalid_parameters(sample_rate, duration) -> None:
	with pytest.raises(InvalidParameterError):
		sample(Step(), sample_rate=sample_rate, duration=duration)


def test_sample_warns_about_aliasing() -> None:
	with pytest.warns(UserWarning, match='Nyquist'):
		sample(Step() + Sinusoid(frequency=5), sample_rate=8, duration=1)
	with warnings.catch_warnings():
		warnings.simplefilter('error')
		sample(Sinusoid(frequency=3), sample_rate=8, duration=1)
