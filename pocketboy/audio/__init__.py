"""Audio unit: square-wave channels, their registers and the mixer."""