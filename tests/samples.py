# Unit RGB -> (h degrees, s, v)
samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120.0, 1.0, 1.0),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1.0),
    (1.0, 1.0, 0.0): (60.0, 1.0, 1.0),
    (0.0, 1.0, 1.0): (180.0, 1.0, 1.0),
    (1.0, 0.0, 1.0): (300.0, 1.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 0.5, 0.0): (30.0, 1.0, 1.0),
    (0.2, 0.4, 0.6): (210.0, 2 / 3, 0.6),
}

# Unit RGB -> (h degrees, s, l)
samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (120.0, 1.0, 0.5),
    (0.0, 0.0, 1.0): (240.0, 1.0, 0.5),
    (1.0, 1.0, 0.0): (60.0, 1.0, 0.5),
    (0.0, 1.0, 1.0): (180.0, 1.0, 0.5),
    (1.0, 0.0, 1.0): (300.0, 1.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 0.5, 0.0): (30.0, 1.0, 0.5),
    (0.2, 0.4, 0.6): (210.0, 0.5, 0.4),
}

samples_hsv_rgb = {hsv: rgb for rgb, hsv in samples_rgb_hsv.items()}
samples_hsl_rgb = {hsl: rgb for rgb, hsl in samples_rgb_hsl.items()}
samples_hsl_hsv = {samples_rgb_hsl[rgb]: samples_rgb_hsv[rgb] for rgb in samples_rgb_hsv}
samples_hsv_hsl = {hsv: hsl for hsl, hsv in samples_hsl_hsv.items()}
