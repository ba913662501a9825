# products/views/product.py

"""
PRODUCT CATALOG VIEW

- GET  /api/v1/products/   public listing (no token needed), ?name= filter
- POST /api/v1/products/   create a product (behind the access gate)
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import generics, serializers
from rest_framework.permissions import SAFE_METHODS, AllowAny, IsAuthenticated

from products.models import Product
from products.serializers import ProductSerializer
from products.stores import DjangoProductStore

logger = logging.getLogger(__name__)


class ProductListCreateView(generics.ListCreateAPIView):
    serializer_class = ProductSerializer
    queryset = Product.objects.all().order_by("id")
    filterset_fields = {"name": ["exact", "icontains"]}

    def get_authenticators(self):
        # Browsing is public; writes pass through the access gate.
        request = getattr(self, "request", None)
        if request is not None and request.method in SAFE_METHODS:
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if self.request.method in SAFE_METHODS:
            return [AllowAny()]
        return [IsAuthenticated()]

    def get_product_store(self):
        return DjangoProductStore()

    @extend_schema(
        responses={
            201: ProductSerializer,
            400: OpenApiResponse(description="Validation error"),
            401: OpenApiResponse(description="permission denied"),
        },
        description="Create a product (requires a signed access token)",
    )
    def post(self, request, *args, **kwargs):
        return super().post(request, *args, **kwargs)

    def perform_create(self, serializer):
        try:
            product = self.get_product_store().create_product(**serializer.validated_data)
        except DjangoValidationError as exc:
            detail = exc.message_dict if hasattr(exc, "error_dict") else exc.messages
            raise serializers.ValidationError(detail) from exc

        serializer.instance = product
        logger.info(
            "Product created",
            extra={"product_id": product.id, "user_id": self.request.user.pk},
        )
