from .constants import ADC_MAX, G_LIMIT


# --- ADC to ACCELERATION CONVERSION ---
def adc_to_acceleration(adc_values, adc_max=ADC_MAX, g_limit=G_LIMIT):
    """
    Convert raw ADC accelerometer codes to acceleration in m/s².

    Maps [0..adc_max] linearly onto [-g_limit..+g_limit]. Codes outside the
    device range are converted as they are, without clamping.

    Parameters:
        adc_values: int, pd.Series, pd.DataFrame or np.ndarray of raw codes
        adc_max: Highest code of the ADC (63 for the 6-bit device)
        g_limit: Acceleration in m/s² corresponding to adc_max
    Returns:
        Converted acceleration in m/s² (float)
    """
    return -g_limit + (adc_values / adc_max) * (2 * g_limit)
