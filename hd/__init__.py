"""hosting-deploy: deploy a web project to preview or live hosting channels from CI."""

__version__ = "0.1.0"
