"""
Offline test harness: replays recorded test cases and plots the result.
"""
