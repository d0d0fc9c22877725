"""
Lukas: a line-oriented postfix arithmetic evaluator,
named for Jan Łukasiewicz, who gave us Polish notation.
"""
