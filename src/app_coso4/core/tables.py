"""
Embedded empirical property tables.

STEAM_TABLE holds (absolute pressure [MPa], saturation temperature [°C])
pairs, strictly increasing in both fields.

DENSITY_TABLE maps a reference temperature [°C] to a curve of
(CoSO4·7H2O mass fraction [%], density [g/cm³]) pairs, strictly increasing in
both fields. Curves at different temperatures are independent plant data.

Bump TABLE_VERSION whenever a value changes.

Author: CoSO4 Evaporation Project
Date: 2026-10-19
"""

TABLE_VERSION = "2024.1"

STEAM_TABLE = (
    (0.001, 6.69), (0.002, 17.20), (0.003, 23.77), (0.004, 28.66), (0.005, 32.55),
    (0.006, 35.28), (0.007, 38.66), (0.008, 41.16), (0.009, 43.41), (0.01, 45.45),
    (0.015, 53.59), (0.02, 59.66), (0.025, 64.55), (0.03, 68.67), (0.035, 71.75),
    (0.04, 75.41), (0.045, 78.26), (0.05, 80.86), (0.055, 83.24), (0.060, 85.45),
    (0.065, 87.51), (0.07, 89.44), (0.075, 91.26), (0.08, 92.98), (0.085, 94.64),
    (0.09, 96.17), (0.095, 97.66), (0.10, 98.08), (0.1013, 100), (0.105, 101),
    (0.1088, 102), (0.1127, 103), (0.1167, 104), (0.1208, 105), (0.125, 106),
    (0.1294, 107), (0.1339, 108), (0.1385, 109), (0.1433, 110), (0.1481, 111),
    (0.1532, 112), (0.1583, 113), (0.1636, 114), (0.1691, 115), (0.1746, 116),
    (0.1804, 117), (0.1863, 118), (0.1923, 119), (0.1985, 120), (0.2049, 121),
    (0.2114, 122), (0.2182, 123), (0.225, 124), (0.2321, 125), (0.2393, 126),
    (0.2467, 127), (0.2543, 128), (0.2621, 129), (0.2701, 130), (0.2783, 131),
    (0.2867, 132), (0.2953, 133), (0.3041, 134), (0.313, 135), (0.3222, 136),
    (0.3317, 137), (0.3414, 138), (0.3513, 139), (0.3614, 140), (0.3718, 141),
    (0.3823, 142), (0.3931, 143), (0.4042, 144), (0.4155, 145), (0.4271, 146),
    (0.4389, 147), (0.451, 148), (0.4633, 149), (0.476, 150), (0.4888, 151),
    (0.5021, 152), (0.5155, 153), (0.5292, 154), (0.537, 155), (0.5577, 156),
    (0.5723, 157), (0.5872, 158), (0.6025, 159), (0.6181, 160), (0.6339, 161),
    (0.6502, 162), (0.6666, 163), (0.6835, 164), (0.7008, 165), (0.7183, 166),
    (0.7362, 167), (0.7544, 168), (0.773, 169), (0.792, 170), (0.8114, 171),
    (0.831, 172), (0.8511, 173), (0.8716, 174), (0.8924, 175), (0.9137, 176),
    (0.9353, 177), (0.9573, 178), (0.9797, 179), (1.0197, 180), (1.0259, 181),
    (1.0496, 182), (1.0737, 183), (1.0983, 184), (1.1233, 185), (1.1487, 186),
    (1.1746, 187), (1.201, 188), (1.2278, 189), (1.2551, 190), (1.2829, 191),
    (1.3111, 192), (1.3397, 193), (1.369, 194), (1.3987, 195), (1.4289, 196),
    (1.4596, 197), (1.4909, 198), (1.5225, 199), (1.5548, 200), (1.5876, 201),
    (1.621, 202), (1.6548, 203), (1.6892, 204), (1.7242, 205), (1.7597, 206),
    (1.7959, 207), (1.8326, 208), (1.8699, 209), (1.9077, 210), (1.9462, 211),
    (1.9852, 212), (2.0248, 213), (2.065, 214), (2.1059, 215), (2.1474, 216),
    (2.1896, 217), (2.2323, 218), (2.2757, 219), (2.3198, 220), (2.3645, 221),
    (2.4098, 222), (2.4559, 223), (2.5026, 224), (2.55, 225), (2.5981, 226),
    (2.6469, 227), (2.6963, 228), (2.7466, 229), (2.7975, 230), (2.8491, 231),
    (2.901, 232), (2.9546, 233), (3.0085, 234), (3.0631, 235), (3.1185, 236),
    (3.1476, 237), (3.2316, 238), (3.2892, 239), (3.3477, 240), (3.407, 241),
    (3.467, 242), (3.5279, 243), (3.5897, 244), (3.6522, 245), (3.7155, 246),
    (3.7797, 247),
)

DENSITY_TABLE = {
    20.0: (
        (0, 1.000), (10, 1.092), (15, 1.142), (20, 1.195), (25, 1.250),
        (30, 1.308), (35, 1.368), (40, 1.431), (45, 1.497), (48, 1.540),
        (50, 1.569), (51, 1.584), (52, 1.599),
    ),
    40.0: (
        (0, 1.000), (15, 1.126), (20, 1.175), (25, 1.227), (30, 1.282),
        (35, 1.340), (40, 1.401), (45, 1.465), (48, 1.505), (50, 1.533),
        (51, 1.547), (52, 1.561),
    ),
    50.0: (
        (0, 1.000), (20, 1.160), (25, 1.210), (30, 1.263), (35, 1.319),
        (40, 1.378), (45, 1.440), (48, 1.478), (50, 1.505), (51, 1.519),
        (52, 1.533),
    ),
    55.0: (
        (0, 1.000), (30, 1.247), (34, 1.293), (38, 1.345), (42, 1.400),
        (46, 1.458), (49, 1.500), (50, 1.515), (51, 1.530), (51.8, 1.540),
    ),
    60.0: (
        (0, 1.000), (32, 1.268), (36, 1.316), (40, 1.368), (44, 1.423),
        (48, 1.482), (50, 1.512), (51, 1.527), (52, 1.542), (53, 1.557),
    ),
    80.0: (
        (0, 0.992), (40, 1.315), (45, 1.367), (48, 1.405), (50, 1.433),
        (51, 1.447), (52, 1.461),
    ),
    100.0: (
        (0, 0.980), (45, 1.330), (48, 1.365), (50, 1.392), (51, 1.405),
        (52, 1.418),
    ),
}
