# --- trial files -------------------------------------------------
TRIAL_PATTERN = "*.txt"

# --- sensor & conversion ----------------------------------------
ADC_MAX = 63          # highest raw code of the device ADC
ADC_RANGE = (0, ADC_MAX)
G_LIMIT = 14.709      # m/s² mapped to ADC_MAX (1.5 g)

ACC_COLUMNS = ["x", "y", "z"]

# --- median filter ----------------------------------------------
DEFAULT_WINDOW = 3

# --- diagnostics ------------------------------------------------
FS = 32     # Hz, device sampling rate used for the spectra
SPECTRUM_ORDERS = (1, 3, 5, 7, 9)
TRIAL_PLOT_LIMIT = 19.6133   # ±2 g
BATCH_PLOT_LIMIT = G_LIMIT
