"""Demo workflow: three payment providers and a provider selector."""

from __future__ import annotations

from payflow.canvas.model import Node, Workflow

PROVIDER_WIDTH: float = 186.0
PROVIDER_HEIGHT: float = 70.0

PROVIDER_NAMES: dict[str, str] = {
    "St": "Stripe",
    "Ap": "Apple Pay",
    "Gp": "Google Pay",
    "Pp": "PayPal",
    "Am": "Amazon Pay",
}


def provider(node_id: str, code: str, x: float, y: float) -> Node:
    return Node(
        id=node_id,
        x=x,
        y=y,
        width=PROVIDER_WIDTH,
        height=PROVIDER_HEIGHT,
        kind="paymentProvider",
        name=PROVIDER_NAMES.get(code, code),
        code=code,
    )


def demo_workflow() -> Workflow:
    """Return a fresh copy of the starting canvas."""
    workflow = Workflow()
    workflow.add_node(provider("4", "Gp", 550, -50))
    workflow.add_node(provider("5", "St", 550, 125))
    workflow.add_node(provider("6", "Ap", 550, 325))
    workflow.add_node(
        Node(
            id="7",
            x=275,
            y=-100,
            width=PROVIDER_WIDTH,
            height=PROVIDER_HEIGHT,
            kind="paymentProviderSelect",
            name="Select provider",
        )
    )
    return workflow
