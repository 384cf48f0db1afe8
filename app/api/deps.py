from fastapi import Request

from app.services.entities import Gateways


def get_gateways(request: Request) -> Gateways:
    """
    Dependency returning the gateways built for this application.
    They share the store attached at startup.
    """
    return request.app.state.gateways
