"""
PyGame front end of Tick Pong
"""
