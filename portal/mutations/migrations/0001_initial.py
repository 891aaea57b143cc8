from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('genes', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PdbAlignment',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('uniprot_id', models.CharField(db_index=True, max_length=32)),
                ('pdb_id', models.CharField(max_length=8)),
                ('chain', models.CharField(max_length=8)),
                ('uniprot_from', models.IntegerField()),
                ('uniprot_to', models.IntegerField()),
                ('identity_percent', models.FloatField(default=0)),
            ],
            options={
                'unique_together': {('uniprot_id', 'pdb_id', 'chain')},
            },
        ),
        migrations.CreateModel(
            name='PfamSequence',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('uniprot_id', models.CharField(blank=True, db_index=True, max_length=32, null=True)),
                ('length', models.IntegerField(blank=True, null=True)),
                ('regions', models.JSONField(blank=True, default=list)),
                ('gene', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='pfam_sequence', to='genes.Gene')),
            ],
        ),
        migrations.CreateModel(
            name='Mutation',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('sample_id', models.CharField(db_index=True, max_length=255)),
                ('protein_change', models.CharField(blank=True, default='', max_length=255)),
                ('protein_position', models.IntegerField(blank=True, null=True)),
                ('mutation_type', models.CharField(choices=[('Missense_Mutation', 'Missense_Mutation'), ('Nonsense_Mutation', 'Nonsense_Mutation'), ('Nonstop_Mutation', 'Nonstop_Mutation'), ('Frame_Shift_Del', 'Frame_Shift_Del'), ('Frame_Shift_Ins', 'Frame_Shift_Ins'), ('In_Frame_Del', 'In_Frame_Del'), ('In_Frame_Ins', 'In_Frame_Ins'), ('Splice_Site', 'Splice_Site'), ('Translation_Start_Site', 'Translation_Start_Site'), ('Silent', 'Silent'), ('Other', 'Other')], default='Other', max_length=36)),
                ('mutation_status', models.CharField(choices=[('Somatic', 'Somatic'), ('Germline', 'Germline'), ('Unknown', 'Unknown')], default='Somatic', max_length=36)),
                ('gene', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='mutations', to='genes.Gene')),
            ],
        ),
    ]
