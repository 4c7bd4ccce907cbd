import numpy as np


# === Component Storage ===
DTYPE = np.float32  # single precision, one value per x/y/z component

# === Configuration Switches ===
DEBUG = False       # General-purpose debug flag (logs non-finite division results)
