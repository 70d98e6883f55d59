c = 299_792_458.0
G = 6.67430e-11

# visual units per physical meter
VIS_SCALE = 6e-9
# frame seconds -> simulated seconds
TIME_MULTIPLIER = 100.0

DEFAULT_MASS = 8.54e36  # kg, Sagittarius A*-like

def schwarzschild_radius(mass: float, G: float = G, c: float = c) -> float:
    return 2.0 * G * mass / (c * c)
