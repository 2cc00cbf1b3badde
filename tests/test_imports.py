"""Test that public API is importable from package root."""


def test_main_imports():
    from health_indicator import (
        HealthIndicatorService,
        HealthIndicatorConfig,
        DatabaseHealthIndicator,
        PingCheckSettings,
        BackendKind,
        ConnectionRegistry,
        AsyncpgConnection,
        SQLAlchemyConnection,
        MongoConnection,
        ProbeTimeoutError,
        MongoConnectionError,
        MissingPackagesError,
    )

    # Just verify they're importable
    assert HealthIndicatorService is not None
    assert DatabaseHealthIndicator is not None
    assert BackendKind.ORACLE == "oracle"
