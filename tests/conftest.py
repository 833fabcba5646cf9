import pytest

from designkit.catalog import Catalog, load_default_catalog
from designkit.core.entities import ColorPicks, DesignKitState


@pytest.fixture
def catalog() -> Catalog:
    """The packaged catalog (loaded once per process)."""
    return load_default_catalog()


@pytest.fixture
def empty_state() -> DesignKitState:
    return DesignKitState()


@pytest.fixture
def full_state() -> DesignKitState:
    """A state touching every token group, a component and a motion slot."""
    return DesignKitState(
        selections={
            "colors": "ocean",
            "typography": "inter-system",
            "spacing": "base-8",
            "radius": "soft",
            "shadows": "subtle",
            "buttons": "solid-rounded",
            "inputs": "range-slider",
            "button-animations": "scale-down",
        },
        color_picks=ColorPicks(),
        type_scale="default",
    )


@pytest.fixture
def state_payload() -> dict:
    """Minimal valid write body, as the browser UI sends it."""
    return {
        "selections": {"colors": "ocean", "radius": "soft"},
        "colorPicks": {"light": {"primary": "#ff0000"}, "dark": {}},
        "typeScale": "default",
        "colorMode": "light",
    }
