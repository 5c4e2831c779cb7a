"""BubbleOS Lite: a small interactive command shell.

Type a command, it runs one filesystem or OS action, and a one-line
result or a numbered error from a fixed catalog comes back.
"""
