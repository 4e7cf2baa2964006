from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_config_and_registry() -> Iterator[None]:
    """Reset module-level state in the config modules around each test."""
    import bundlekit.config.registry as registry
    import bundlekit.config.validation as validation

    # Settings declared at import time (BundleSettings) must survive
    registered = list(registry._REGISTRY)  # pyright: ignore[reportPrivateUsage]
    validation.reset_config()

    yield

    registry._REGISTRY[:] = registered  # pyright: ignore[reportPrivateUsage]
    validation.reset_config()
