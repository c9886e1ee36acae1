"""
Qt bindings for running sounds inside a QApplication.
"""
