EXIT_OK = 0  # Normal success
EXIT_GENERIC = 1  # Any failure: missing input, parse error or coverage regression
