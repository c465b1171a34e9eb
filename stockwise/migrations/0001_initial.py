"""
Initial migration for StockWise models.
"""

import django.db.models.deletion
import django.db.models.functions.text
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

import stockwise.models.loan


class Migration(migrations.Migration):
    """Create StockWise models: Product, Loan, StockMovement, Notification, UserProfile, AccountClaims."""

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.CharField(help_text='Identificador único, no se puede cambiar.', max_length=64, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Nombre')),
                ('category', models.CharField(max_length=100, verbose_name='Categoría')),
                ('location', models.CharField(max_length=100, verbose_name='Ubicación')),
                ('quantity', models.PositiveIntegerField(default=0, verbose_name='Cantidad')),
                ('reorder_point', models.PositiveIntegerField(default=0, help_text='Con esta cantidad o menos el stock se considera bajo.', verbose_name='Punto de reorden')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Producto',
                'verbose_name_plural': 'Productos',
                'ordering': ['name'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(quantity__gte=0), name='product_quantity_non_negative'),
                    models.UniqueConstraint(django.db.models.functions.text.Lower('id'), name='unique_product_id_ci'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Loan',
            fields=[
                ('id', models.CharField(default=stockwise.models.loan.new_record_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ('product_id', models.CharField(db_index=True, max_length=64, verbose_name='Producto')),
                ('product_name', models.CharField(max_length=200, verbose_name='Nombre del producto')),
                ('requester', models.CharField(max_length=200, verbose_name='Solicitante')),
                ('loan_date', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Fecha de préstamo')),
                ('quantity', models.PositiveIntegerField(verbose_name='Cantidad')),
                ('status', models.CharField(choices=[('Prestado', 'Prestado'), ('Devuelto', 'Devuelto')], db_index=True, default='Prestado', max_length=20, verbose_name='Estado')),
                ('return_date', models.DateTimeField(blank=True, null=True, verbose_name='Fecha de devolución')),
            ],
            options={
                'verbose_name': 'Préstamo',
                'verbose_name_plural': 'Préstamos',
                'ordering': ['-loan_date'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(quantity__gte=1), name='loan_quantity_positive'),
                ],
            },
        ),
        migrations.CreateModel(
            name='StockMovement',
            fields=[
                ('id', models.CharField(default=stockwise.models.loan.new_record_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ('product_id', models.CharField(db_index=True, max_length=64, verbose_name='Producto')),
                ('product_name', models.CharField(max_length=200, verbose_name='Nombre del producto')),
                ('quantity', models.PositiveIntegerField(verbose_name='Cantidad')),
                ('type', models.CharField(choices=[('descuento', 'Descuento')], default='descuento', max_length=20, verbose_name='Tipo')),
                ('reason', models.CharField(max_length=255, verbose_name='Razón')),
                ('date', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Fecha')),
            ],
            options={
                'verbose_name': 'Movimiento',
                'verbose_name_plural': 'Movimientos',
                'ordering': ['-date'],
            },
        ),
        migrations.CreateModel(
            name='Notification',
            fields=[
                ('id', models.CharField(default=stockwise.models.loan.new_record_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ('type', models.CharField(choices=[('ajuste', 'Ajuste')], default='ajuste', max_length=20)),
                ('title', models.CharField(max_length=200, verbose_name='Título')),
                ('description', models.TextField(blank=True, verbose_name='Descripción')),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('is_read', models.BooleanField(default=False, verbose_name='Leída')),
            ],
            options={
                'verbose_name': 'Notificación',
                'verbose_name_plural': 'Notificaciones',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='UserProfile',
            fields=[
                ('uid', models.CharField(max_length=128, primary_key=True, serialize=False, verbose_name='UID')),
                ('name', models.CharField(max_length=200, verbose_name='Nombre')),
                ('username', models.CharField(max_length=150, unique=True, verbose_name='Usuario')),
                ('role', models.CharField(choices=[('admin', 'Administrador'), ('user', 'Usuario')], default='user', max_length=10, verbose_name='Rol')),
                ('permissions', models.JSONField(blank=True, default=list, verbose_name='Permisos')),
            ],
            options={
                'verbose_name': 'Perfil de usuario',
                'verbose_name_plural': 'Perfiles de usuario',
                'ordering': ['username'],
            },
        ),
        migrations.CreateModel(
            name='AccountClaims',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('claims', models.JSONField(blank=True, default=dict, verbose_name='Claims')),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='stockwise_claims', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Claims de cuenta',
                'verbose_name_plural': 'Claims de cuentas',
            },
        ),
    ]
