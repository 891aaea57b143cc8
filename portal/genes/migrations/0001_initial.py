from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import model_utils.fields


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Gene',
            fields=[
                ('entrez_gene_id', models.IntegerField(primary_key=True, serialize=False)),
                ('hugo_gene_symbol', models.CharField(db_index=True, max_length=255, unique=True)),
                ('type', models.CharField(blank=True, max_length=50, null=True)),
                ('cytoband', models.CharField(blank=True, max_length=64, null=True)),
                ('length', models.IntegerField(blank=True, null=True)),
            ],
            options={
                'ordering': ['hugo_gene_symbol'],
            },
        ),
        migrations.CreateModel(
            name='GeneticProfile',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('stable_id', models.CharField(db_index=True, max_length=255, unique=True)),
                ('name', models.CharField(blank=True, default='', max_length=255)),
            ],
        ),
        migrations.CreateModel(
            name='Sample',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('stable_id', models.CharField(db_index=True, max_length=255, unique=True)),
            ],
        ),
        migrations.CreateModel(
            name='GenePanel',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('stable_id', models.CharField(db_index=True, max_length=255, unique=True)),
                ('description', models.TextField(blank=True, default='')),
                ('genes', models.ManyToManyField(blank=True, related_name='gene_panels', to='genes.Gene')),
            ],
            options={
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='SampleProfile',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('gene_panel', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to='genes.GenePanel')),
                ('genetic_profile', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='genes.GeneticProfile')),
                ('sample', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='genes.Sample')),
            ],
            options={
                'unique_together': {('sample', 'genetic_profile')},
            },
        ),
    ]
