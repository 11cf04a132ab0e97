"""
Command Line Interface for flowctl.

Typer app, printers and line sinks, and the control-plane client used by
the commands.
"""
