import pytest


# VCEG-M33 numbers
@pytest.fixture
def m33_curves():
    curve_a = [
        (90.33, 27.95),
        (181.03, 31.17),
        (332.99, 34.44),
        (547.79, 38.11),
    ]
    curve_b = [
        (127.1719, 29.9286),
        (186.14, 32.4165),
        (307.2924, 34.7013),
        (481.5588, 37.4561),
    ]
    return curve_a, curve_b


# ETRO barb512 numbers (descending rate, as reported)
@pytest.fixture
def etro_curves():
    curve_a = [
        (2.99899, 48.6681),
        (1.99884, 43.8357),
        (1.49673, 41.3982),
        (0.99707, 38.0124),
        (0.745941, 35.5122),
        (0.596436, 33.8673),
        (0.495148, 32.6658),
        (0.29425, 29.4505),
        (0.244049, 28.484),
    ]
    curve_b = [
        (2.997253, 48.5637),
        (1.968292, 43.7318),
        (1.472565, 41.2727),
        (0.994965, 38.0001),
        (0.748871, 35.6375),
        (0.58902, 33.9057),
        (0.499176, 32.8318),
        (0.296753, 29.6851),
        (0.249634, 28.8244),
    ]
    return curve_a, curve_b
