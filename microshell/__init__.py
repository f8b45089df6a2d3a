"""
MicroShell – Python 3
Features:
 - Builtins: cd, help, exit
 - External commands via psutil.Popen (PATH search, foreground wait)
 - Line editing with readline on a real terminal
"""

__version__ = "0.1.0"
