import pytest

from mac_navstokes import SimulationConfig, ConfigurationError


def test_defaults_describe_the_wind_tunnel():
    config = SimulationConfig()
    assert (config.num_x, config.num_y) == (160, 160)
    assert config.h == 0.4
    assert config.dt == pytest.approx(1.0 / 30)
    assert config.projection_iterations == 30
    assert config.convergence_tolerance == 1e-7
    assert config.inflow_speed == 50.0


def test_replace_returns_validated_copy():
    config = SimulationConfig()
    smaller = config.replace(num_x=40)
    assert smaller.num_x == 40
    assert config.num_x == 160

    with pytest.raises(ConfigurationError):
        config.replace(dt=-1.0)


@pytest.mark.parametrize("changes", [
    {'num_x': True},
    {'num_y': 1},
    {'h': float('nan')},
    {'dt': '0.1'},
    {'projection_iterations': 0},
    {'convergence_tolerance': -1e-3},
    {'pipe_fraction': 1.5},
])
def test_invalid_settings_are_rejected(changes):
    with pytest.raises(ConfigurationError):
        SimulationConfig(**changes)


def test_config_is_frozen():
    config = SimulationConfig()
    with pytest.raises(AttributeError):
        config.num_x = 10
