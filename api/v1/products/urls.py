"""
URL configuration for product API endpoints.
"""

from django.urls import path

from api.v1.products import views

app_name = "products"

urlpatterns = [
    path(
        "",
        views.ProductListCreateView.as_view(),
        name="product-list",
    ),
    path(
        "<str:product_id>",
        views.ProductDetailView.as_view(),
        name="product-detail",
    ),
    path(
        "<str:product_id>/featured",
        views.ProductFeaturedToggleView.as_view(),
        name="product-featured",
    ),
]
