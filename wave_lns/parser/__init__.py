"""
Instance reading and solution writing for the Wave Order Picking problem.
"""
