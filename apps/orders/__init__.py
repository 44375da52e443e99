"""
Orders app for the Kunafa Kingdom POS backend.

Holds charges, orders and the order submission service used at checkout.
"""
