import pytest

from blockrender.light import Light


def test_defaults_are_zero():
    light = Light()
    assert light.color == (0.0, 0.0, 0.0)
    assert light.position == (0.0, 0.0, 0.0)


def test_values_are_stored_as_float_tuples():
    light = Light(color=[1, 1, 1], position=(1.2, 1.0, 2.0))
    assert light.color == (1.0, 1.0, 1.0)
    assert light.position == (1.2, 1.0, 2.0)
    assert all(isinstance(c, float) for c in light.color)


def test_equal_lights_compare_equal():
    assert Light((1, 0, 0), (0, 2, 0)) == Light((1.0, 0.0, 0.0), (0.0, 2.0, 0.0))


@pytest.mark.parametrize("bad", [(1.0, 2.0), (1.0, 2.0, 3.0, 4.0)])
def test_wrong_length_is_rejected(bad):
    with pytest.raises(ValueError):
        Light(color=bad)
    with pytest.raises(ValueError):
        Light(position=bad)