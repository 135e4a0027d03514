"""Application composition layer for the Tkinter GUI.

The runtime in this package owns the session and its subscriptions; the
``App`` composition root wires views, view models and adapters into a
runnable desktop window without placing session logic in views.
"""
