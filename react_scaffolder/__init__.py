"""Interactive React project scaffolding (create-react-app or Vite)."""

__version__ = "0.1.0"
