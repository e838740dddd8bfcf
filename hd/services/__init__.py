"""Application services.

Services sit between the domain types in core/ and the process layer in
platform/, and never import the CLI.
"""
