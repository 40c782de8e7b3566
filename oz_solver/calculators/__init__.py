"""
Calculators subpackage

The OZ solve engine and quantities derived from its result.
"""
