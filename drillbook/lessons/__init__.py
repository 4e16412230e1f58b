"""Worked answers to the exercises, one module per topic."""