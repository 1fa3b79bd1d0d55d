"""
Shortest chains, school cliques and connectors in a friendship graph
"""
__version__ = "0.1.0"
