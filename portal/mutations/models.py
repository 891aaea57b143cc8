##
## Copyright (c) 2019 Mutation Portal contributors.
##
## This file is part of Mutation Portal.
##
## Licensed to the Apache Software Foundation (ASF) under one
## or more contributor license agreements.  See the NOTICE file
## distributed with this work for additional information
## regarding copyright ownership.  The ASF licenses this file
## to you under the Apache License, Version 2.0 (the
## "License"); you may not use this file except in compliance
## with the License.  You may obtain a copy of the License at
##
##   http://www.apache.org/licenses/LICENSE-2.0
##
## Unless required by applicable law or agreed to in writing,
## software distributed under the License is distributed on an
## "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
## KIND, either express or implied.  See the License for the
## specific language governing permissions and limitations
## under the License.
##
from django.db import models
from model_utils import Choices
from genes.models import Gene


class MutationManager(models.Manager):
    def get_mutations(self, gene_symbol, sample_ids=None):
        """Mutations of a gene, optionally restricted to some samples"""

        qs = self.get_queryset()\
            .select_related('gene')\
            .filter(gene__hugo_gene_symbol=gene_symbol)

        if sample_ids is not None:
            qs = qs.filter(sample_id__in=sample_ids)

        return qs.order_by('protein_position', 'sample_id')


class Mutation(models.Model):
    STATUS = Choices(
        'Somatic',
        'Germline',
        'Unknown'
    )

    TYPES = Choices(
        'Missense_Mutation',
        'Nonsense_Mutation',
        'Nonstop_Mutation',
        'Frame_Shift_Del',
        'Frame_Shift_Ins',
        'In_Frame_Del',
        'In_Frame_Ins',
        'Splice_Site',
        'Translation_Start_Site',
        'Silent',
        'Other'
    )

    # mutation type -> group used to colour the diagram
    MAIN_TYPES = {
        TYPES.Missense_Mutation: 'missense',
        TYPES.Nonsense_Mutation: 'truncating',
        TYPES.Nonstop_Mutation: 'truncating',
        TYPES.Frame_Shift_Del: 'truncating',
        TYPES.Frame_Shift_Ins: 'truncating',
        TYPES.Splice_Site: 'truncating',
        TYPES.Translation_Start_Site: 'truncating',
        TYPES.In_Frame_Del: 'inframe',
        TYPES.In_Frame_Ins: 'inframe',
    }

    gene = models.ForeignKey(Gene, related_name='mutations', on_delete=models.CASCADE)
    sample_id = models.CharField(max_length=255, db_index=True)
    protein_change = models.CharField(max_length=255, blank=True, default='')
    protein_position = models.IntegerField(null=True, blank=True)
    mutation_type = models.CharField(choices=TYPES, default=TYPES.Other, max_length=36)
    mutation_status = models.CharField(choices=STATUS, default=STATUS.Somatic, max_length=36)

    objects = MutationManager()

    def __str__(self):
        return "{} {} ({})".format(self.gene_symbol, self.protein_change, self.sample_id)

    @property
    def gene_symbol(self):
        return self.gene.hugo_gene_symbol

    @property
    def is_germline(self):
        return self.mutation_status == Mutation.STATUS.Germline

    @property
    def main_type(self):
        return self.MAIN_TYPES.get(self.mutation_type, 'other')


class PfamSequence(models.Model):
    """Protein sequence of a gene, with its Pfam domains

    `regions` is a list of {"start": int, "end": int, "name": str}.
    """

    gene = models.OneToOneField(Gene, related_name='pfam_sequence', on_delete=models.CASCADE)
    uniprot_id = models.CharField(max_length=32, null=True, blank=True, db_index=True)
    length = models.IntegerField(null=True, blank=True)
    regions = models.JSONField(default=list, blank=True)

    def __str__(self):
        return "{} ({})".format(self.uniprot_id, self.length)


class PdbAlignmentManager(models.Manager):
    def get_alignments(self, uniprot_id):
        return self.get_queryset()\
            .filter(uniprot_id=uniprot_id)\
            .order_by('-identity_percent', 'uniprot_from', 'pdb_id', 'chain')


class PdbAlignment(models.Model):
    uniprot_id = models.CharField(max_length=32, db_index=True)
    pdb_id = models.CharField(max_length=8)
    chain = models.CharField(max_length=8)
    uniprot_from = models.IntegerField()
    uniprot_to = models.IntegerField()
    identity_percent = models.FloatField(default=0)

    objects = PdbAlignmentManager()

    class Meta:
        unique_together = (('uniprot_id', 'pdb_id', 'chain'),)

    def __str__(self):
        return "{}:{}".format(self.pdb_id, self.chain)

    @property
    def coverage(self):
        return self.uniprot_to - self.uniprot_from + 1
