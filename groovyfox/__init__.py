"""groovyfox - Foxy, the shoe-and-festival demo chatbot."""

__version__ = "0.1.0"
