from django.db import migrations, models

import shared.domain.base_entity


def category_fields():
    return [
        ('id', models.CharField(default=shared.domain.base_entity.new_entity_id, editable=False, max_length=32, primary_key=True, serialize=False)),
        ('title', models.CharField(db_index=True, max_length=255)),
        ('description', models.TextField(blank=True, default='')),
        ('parent_id', models.CharField(blank=True, db_index=True, default='', max_length=32)),
        ('position', models.IntegerField(blank=True, null=True)),
        ('status', models.CharField(choices=[('active', 'Active'), ('inactive', 'Inactive')], default='active', max_length=16)),
        ('deleted', models.BooleanField(db_index=True, default=False)),
        ('created_at', models.DateTimeField(auto_now_add=True)),
        ('updated_at', models.DateTimeField(auto_now=True)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ProductCategoryModel',
            fields=category_fields(),
            options={
                'verbose_name': 'Product category',
                'verbose_name_plural': 'Product categories',
                'db_table': 'products_category',
                'ordering': ['position', 'created_at'],
                'abstract': False,
                'indexes': [models.Index(fields=['parent_id', 'deleted'], name='prodcat_parent_deleted_idx')],
            },
        ),
        migrations.CreateModel(
            name='ArticleCategoryModel',
            fields=category_fields(),
            options={
                'verbose_name': 'Article category',
                'verbose_name_plural': 'Article categories',
                'db_table': 'articles_category',
                'ordering': ['position', 'created_at'],
                'abstract': False,
                'indexes': [models.Index(fields=['parent_id', 'deleted'], name='artcat_parent_deleted_idx')],
            },
        ),
    ]
