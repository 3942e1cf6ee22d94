import pytest

from hidpp10.sensor import S6006, S6090, S9500, S9808, ListSensor, RangeSensor, Sensor


def test_sensor_is_abstract():
    with pytest.raises(TypeError):
        Sensor()


def test_list_sensor_iterates_resolutions():
    assert [S6006.to_dpi(0x80 | i) for i in range(4)] == [400, 800, 1600, 2000]
    assert list(ListSensor([400, 800, 1600])) == [400, 800, 1600]


def test_list_sensor_from_range():
    sensor = ListSensor.from_range(0, 3200, 200)
    values = list(sensor)
    assert values[0] == 0
    assert values[-1] == 3200
    assert all(b - a == 200 for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("dpi", [400, 800, 1600, 2000])
def test_list_sensor_round_trip_exact(dpi):
    assert S6006.to_dpi(S6006.from_dpi(dpi)) == dpi


@pytest.mark.parametrize("dpi", [0, 100, 700, 1700, 5000])
def test_list_sensor_values_are_flagged(dpi):
    assert (S6006.from_dpi(dpi) & 0x80) == 0x80


def test_list_sensor_picks_nearest():
    assert S6006.to_dpi(S6006.from_dpi(700)) == 800
    assert S6006.to_dpi(S6006.from_dpi(1700)) == 1600


def test_list_sensor_tie_goes_low():
    assert S6006.to_dpi(S6006.from_dpi(600)) == 400


def test_list_sensor_clamps():
    assert S6006.to_dpi(S6006.from_dpi(100)) == 400
    assert S6006.to_dpi(S6006.from_dpi(9000)) == 2000


def test_list_sensor_skips_zero_resolution():
    assert S6090.to_dpi(S6090.from_dpi(0)) == 200


def test_list_sensor_zero_internal_value():
    assert S6090.to_dpi(0) == 0


def test_list_sensor_rejects_unflagged_value():
    with pytest.raises(ValueError):
        S6006.to_dpi(0x01)


def test_list_sensor_limits():
    assert S6006.minimum_resolution() == 400
    assert S6006.maximum_resolution() == 2000
    assert S6090.minimum_resolution() == 0
    assert S6090.maximum_resolution() == 3200


@pytest.mark.parametrize("dpi", range(200, 8201, 50))
def test_range_sensor_round_trip(dpi):
    assert S9808.to_dpi(S9808.from_dpi(dpi)) == dpi


def test_range_sensor_clamps_to_limits():
    assert S9808.to_dpi(S9808.from_dpi(10000)) == 8200
    assert S9808.to_dpi(S9808.from_dpi(10)) == 200


def test_range_sensor_caps_to_dpi_at_maximum():
    assert S9500.to_dpi(0xFF) <= S9500.maximum_resolution()


def test_range_sensor_zero():
    assert S9500.to_dpi(0) == 0


def test_range_sensor_is_monotonic():
    values = [S9500.from_dpi(d) for d in range(200, 5701, 50)]
    assert values == sorted(values)


def test_range_sensor_limits_and_step():
    assert S9500.minimum_resolution() == 200
    assert S9500.maximum_resolution() == 5700
    assert S9808.resolution_step_hint() == 50


def test_custom_range_sensor():
    sensor = RangeSensor(100, 1000, 10, 1, 10)
    assert sensor.to_dpi(sensor.from_dpi(550)) == 550