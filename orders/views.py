# orders/views.py

"""
CART CHECKOUT VIEW

POST /api/v1/cart/checkout/

Flow (single pass, first failure wins):
    access gate -> payload validation -> resolve products -> assemble order -> 200

Error mapping:
- auth failure (any reason)                      -> 401 "permission denied"
- malformed payload / unpriceable line           -> 400
- unknown product id                             -> 400
- storage failure                                -> 500 (generic body, logged)
"""

from __future__ import annotations

import logging

from django.db import DatabaseError
from drf_spectacular.utils import OpenApiExample, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from orders.serializers import CheckoutInputSerializer, CheckoutResponseSerializer
from orders.services import (
    CheckoutValidationError,
    OrderPersistenceError,
    checkout,
)
from orders.stores import DjangoOrderStore
from products.services import ProductNotFoundError
from products.stores import DjangoProductStore

logger = logging.getLogger(__name__)


def error_response(*, message: str, http_status: int):
    return Response({"detail": message}, status=http_status)


class CartCheckoutView(APIView):
    permission_classes = [IsAuthenticated]
    parser_classes = [JSONParser]

    def get_product_store(self):
        return DjangoProductStore()

    def get_order_store(self):
        return DjangoOrderStore()

    @extend_schema(
        request=CheckoutInputSerializer,
        responses={
            200: CheckoutResponseSerializer,
            400: OpenApiResponse(description="Invalid payload or unknown product"),
            401: OpenApiResponse(description="permission denied"),
            500: OpenApiResponse(description="Storage failure"),
        },
        examples=[
            OpenApiExample(
                "Two units of product 1",
                value={"items": [{"product_id": 1, "quantity": 2}]},
                request_only=True,
            ),
        ],
        description="Convert the submitted cart into a pending order.",
        tags=["Cart"],
    )
    def post(self, request):
        serializer = CheckoutInputSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"detail": "invalid payload", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        data = serializer.validated_data

        try:
            result = checkout(
                user=request.user,
                items=data["items"],
                address=data.get("address", ""),
                product_store=self.get_product_store(),
                order_store=self.get_order_store(),
            )
        except ProductNotFoundError as exc:
            return error_response(message=str(exc), http_status=status.HTTP_400_BAD_REQUEST)
        except CheckoutValidationError as exc:
            return error_response(message=str(exc), http_status=status.HTTP_400_BAD_REQUEST)
        except (OrderPersistenceError, DatabaseError):
            logger.exception("Checkout failed", extra={"user_id": request.user.pk})
            return error_response(
                message="internal server error",
                http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        body = CheckoutResponseSerializer(
            {"order_id": result.order_id, "total_price": result.total_price}
        ).data
        return Response(body, status=status.HTTP_200_OK)
