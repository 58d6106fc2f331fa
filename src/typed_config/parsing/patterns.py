import re

# Literal grammars - always applied with fullmatch, never to a prefix
VALUE_PATTERNS = {
    'int': re.compile(r'[-+]?[0-9]+'),
    'real': re.compile(r'''
        [-+]?
        (?:
            (?:[0-9]+\.?[0-9]*|\.[0-9]+)   # mantissa
            (?:[eE][-+]?[0-9]+)?           # optional exponent
          | inf(?:inity)?
          | nan
        )
    ''', re.VERBOSE | re.IGNORECASE),
    'bool': re.compile(r'true|false'),
}

# Signed 32-bit range for int values
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1
