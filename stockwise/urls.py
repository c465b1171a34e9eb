"""
URL patterns for StockWise.

Include in the project's urls.py:
    path('api/', include('stockwise.urls')),
"""

from django.urls import path

from stockwise import views

app_name = 'stockwise'

urlpatterns = [
    path('products/', views.product_list, name='product-list'),
    path('products/new/', views.product_create, name='product-create'),
    path('products/<str:product_id>/update/', views.product_update, name='product-update'),
    path('products/<str:product_id>/delete/', views.product_delete, name='product-delete'),
    path('products/<str:product_id>/adjust/', views.product_adjust, name='product-adjust'),
    path('loans/', views.loan_list, name='loan-list'),
    path('loans/new/', views.loan_create, name='loan-create'),
    path('loans/<str:loan_id>/return/', views.loan_return, name='loan-return'),
    path('loans/<str:loan_id>/delete/', views.loan_delete, name='loan-delete'),
    path('report/', views.inventory_report, name='report'),
    path('notifications/', views.notification_list, name='notification-list'),
    path('notifications/<str:notification_id>/read/', views.notification_read, name='notification-read'),
    path('notifications/<str:notification_id>/delete/', views.notification_delete, name='notification-delete'),
]
