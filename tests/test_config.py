from tilepath import config


def test_diagonal_cost_keeps_octile_admissible():
    # Diagonal step must cost between one and two orthogonal steps
    assert config.ORTHOGONAL_COST <= config.DIAGONAL_COST <= 2 * config.ORTHOGONAL_COST


def test_map_file_extension():
    # Map file should be a JSON definition
    assert config.MAP_FILE.endswith(".json")


def test_default_collide_property():
    assert config.COLLIDE_KEY == "COLLIDE"
    assert config.COLLIDE_VALUE == "1"
