"""Option pricing engines, strategy P&L analysis, dashboard data and markup, and an interactive console."""

__version__ = "0.1.0"