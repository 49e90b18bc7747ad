"""Embedded table of expected scenarios, revised when new scenarios are introduced."""

EXPECTED_SCENARIOS: tuple[tuple[str, str, str, str], ...] = (
    # Equity - US Large Cap
    ("Equity", "US Large Cap", "Entity A", "Base"),
    ("Equity", "US Large Cap", "Entity A", "Stress"),
    ("Equity", "US Large Cap", "Entity A", "Adverse"),
    ("Equity", "US Large Cap", "Entity B", "Base"),
    ("Equity", "US Large Cap", "Entity B", "Stress"),
    ("Equity", "US Large Cap", "Entity B", "Adverse"),

    # Equity - US Small Cap
    ("Equity", "US Small Cap", "Entity A", "Base"),
    ("Equity", "US Small Cap", "Entity A", "Stress"),
    ("Equity", "US Small Cap", "Entity B", "Base"),
    ("Equity", "US Small Cap", "Entity B", "Stress"),

    # Equity - International
    ("Equity", "International", "Entity A", "Base"),
    ("Equity", "International", "Entity A", "Stress"),
    ("Equity", "International", "Entity A", "Adverse"),
    ("Equity", "International", "Entity C", "Base"),
    ("Equity", "International", "Entity C", "Stress"),
    ("Equity", "International", "Entity C", "Adverse"),

    # Equity - Emerging Markets
    ("Equity", "Emerging Markets", "Entity B", "Base"),
    ("Equity", "Emerging Markets", "Entity B", "Stress"),
    ("Equity", "Emerging Markets", "Entity C", "Base"),
    ("Equity", "Emerging Markets", "Entity C", "Stress"),

    # Fixed Income - Corporate Bonds
    ("Fixed Income", "Corporate Bonds", "Entity A", "Base"),
    ("Fixed Income", "Corporate Bonds", "Entity A", "Stress"),
    ("Fixed Income", "Corporate Bonds", "Entity A", "Adverse"),
    ("Fixed Income", "Corporate Bonds", "Entity A", "Severe"),
    ("Fixed Income", "Corporate Bonds", "Entity B", "Base"),
    ("Fixed Income", "Corporate Bonds", "Entity B", "Stress"),
    ("Fixed Income", "Corporate Bonds", "Entity B", "Adverse"),
    ("Fixed Income", "Corporate Bonds", "Entity B", "Severe"),

    # Fixed Income - Government Bonds
    ("Fixed Income", "Government Bonds", "Entity A", "Base"),
    ("Fixed Income", "Government Bonds", "Entity A", "Stress"),
    ("Fixed Income", "Government Bonds", "Entity A", "Adverse"),
    ("Fixed Income", "Government Bonds", "Entity C", "Base"),
    ("Fixed Income", "Government Bonds", "Entity C", "Stress"),
    ("Fixed Income", "Government Bonds", "Entity C", "Adverse"),

    # Fixed Income - Municipal Bonds
    ("Fixed Income", "Municipal Bonds", "Entity A", "Base"),
    ("Fixed Income", "Municipal Bonds", "Entity A", "Stress"),
    ("Fixed Income", "Municipal Bonds", "Entity C", "Base"),
    ("Fixed Income", "Municipal Bonds", "Entity C", "Stress"),

    # Fixed Income - High Yield
    ("Fixed Income", "High Yield", "Entity B", "Base"),
    ("Fixed Income", "High Yield", "Entity B", "Stress"),
    ("Fixed Income", "High Yield", "Entity B", "Adverse"),

    # Derivatives - Interest Rate
    ("Derivatives", "Interest Rate", "Entity A", "Base"),
    ("Derivatives", "Interest Rate", "Entity A", "Stress"),
    ("Derivatives", "Interest Rate", "Entity A", "Adverse"),
    ("Derivatives", "Interest Rate", "Entity A", "Severe"),
    ("Derivatives", "Interest Rate", "Entity B", "Base"),
    ("Derivatives", "Interest Rate", "Entity B", "Stress"),
    ("Derivatives", "Interest Rate", "Entity B", "Adverse"),
    ("Derivatives", "Interest Rate", "Entity B", "Severe"),

    # Derivatives - Credit
    ("Derivatives", "Credit", "Entity A", "Base"),
    ("Derivatives", "Credit", "Entity A", "Stress"),
    ("Derivatives", "Credit", "Entity A", "Adverse"),
    ("Derivatives", "Credit", "Entity B", "Base"),
    ("Derivatives", "Credit", "Entity B", "Stress"),
    ("Derivatives", "Credit", "Entity B", "Adverse"),

    # Derivatives - Equity
    ("Derivatives", "Equity", "Entity A", "Base"),
    ("Derivatives", "Equity", "Entity A", "Stress"),
    ("Derivatives", "Equity", "Entity B", "Base"),
    ("Derivatives", "Equity", "Entity B", "Stress"),

    # Cash - Money Market
    ("Cash", "Money Market", "Entity A", "Base"),
    ("Cash", "Money Market", "Entity B", "Base"),
    ("Cash", "Money Market", "Entity C", "Base"),

    # Alternative - Real Estate
    ("Alternative", "Real Estate", "Entity B", "Base"),
    ("Alternative", "Real Estate", "Entity B", "Stress"),
    ("Alternative", "Real Estate", "Entity C", "Base"),
    ("Alternative", "Real Estate", "Entity C", "Stress"),

    # Alternative - Commodities
    ("Alternative", "Commodities", "Entity B", "Base"),
    ("Alternative", "Commodities", "Entity B", "Stress"),
    ("Alternative", "Commodities", "Entity B", "Adverse"),
    ("Alternative", "Commodities", "Entity C", "Base"),
    ("Alternative", "Commodities", "Entity C", "Stress"),
    ("Alternative", "Commodities", "Entity C", "Adverse"),
)
