"""
Validation Constants

Contains whitelist values for validating user input to prevent
injection attacks and ensure data integrity.
"""

# Linen choices: bring your own set or rent sets from the cabin
LINEN_BRING_OWN = 'bringing-own'
LINEN_RENT = 'rent'
VALID_LINEN_MODES = {LINEN_BRING_OWN, LINEN_RENT}

# Valid transport modes for arrival records (whitelist for security)
VALID_TRANSPORT_MODES = {'car', 'train', 'bus', 'plane', 'other'}

# Upper bound on rented linen sets per reservation
MAX_LINEN_SETS = 50

# Maximum field lengths for security
MAX_LENGTHS = {
    'ingredient_name': 200,
    'username': 80,
    'password': 200,
    'meal_name': 200,
    'external_link': 500,
    'notes': 2000,
}
