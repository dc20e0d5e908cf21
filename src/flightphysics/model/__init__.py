"""
The MODEL layer contains the simulation state and the simplified aerodynamic formulas.
It has NO knowledge of the GUI (Qt). Every model is sized in canvas pixels and is
advanced by the view layer with the elapsed time of each frame.
"""
