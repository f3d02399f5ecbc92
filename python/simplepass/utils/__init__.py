"""
Password engine, strength labels and input validation.
"""
