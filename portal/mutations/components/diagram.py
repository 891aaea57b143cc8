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
import logging
from collections import Counter
from collections import OrderedDict
from io import BytesIO
import matplotlib
matplotlib.use("Agg")  # headless
from matplotlib.figure import Figure  # noqa: E402
from matplotlib.patches import Rectangle  # noqa: E402
from matplotlib.ticker import MaxNLocator  # noqa: E402
from .model import parse_length  # noqa: E402


logger = logging.getLogger(__name__)

DPI = 100

DEFAULT_OPTIONS = {
    'width': 740,
    'height': 180,
    'margin_left': 40,
    'margin_right': 30,
    'margin_top': 30,
    'margin_bottom': 30,
    'lollipop_radius_min': 3,
    'lollipop_radius_max': 8,
    'y_max': None,
    'show_regions': True,
    'label_font': "sans-serif",
    'label_font_size': 9,
    'top_label_font_size': 11,
    'backbone_color': "#BABDB6",
    'region_colors': ("#2DCF00", "#FF5353", "#5B5BFF", "#EBD61D", "#BA21E0", "#FF9C42"),
    'lollipop_colors': {
        'missense': "#008000",
        'truncating': "#000000",
        'inframe': "#8B4513",
        'other': "#8B00C9",
    },
}

# most severe first, used to break ties on the colour of a position
TYPE_PRIORITY = ('truncating', 'inframe', 'missense', 'other')

# y data coordinates: sticks grow from 0 to 1, the sequence sits below 0
REGION_BOTTOM = -0.5
REGION_TOP = -0.05
BACKBONE_BOTTOM = -0.35
BACKBONE_TOP = -0.2
Y_TOP = 1.15

SVG_RC = {
    'svg.fonttype': 'none',
    'svg.hashsalt': 'mutation-diagram',
}


class MutationCollection(list):
    """Mutations with the per position grouping used by the diagram"""

    def by_position(self):
        positions = OrderedDict()
        for mutation in sorted(self, key=lambda m: m.protein_position or 0):
            if mutation.protein_position is None:
                continue
            positions.setdefault(mutation.protein_position, []).append(mutation)
        return positions

    def max_count(self):
        counts = [len(mutations) for mutations in self.by_position().values()]
        return max(counts) if counts else 0


class MutationDiagram:
    """Lollipop plot of the mutations of a gene along its protein sequence

    Drawn with matplotlib; `x_scale` maps a residue to the horizontal pixel
    offset of the plot so other panels can line up with it.
    """

    def __init__(self, gene_symbol, options, mutations, el=None):
        self.gene_symbol = gene_symbol
        self.options = dict(DEFAULT_OPTIONS)
        self.options.update(options or {})
        self.mutations = MutationCollection(mutations or [])
        self.el = el
        self.sequence = None
        self.length = None
        self.figure = None
        self.top_label = None
        self.lollipops = OrderedDict()
        self.regions = []

    def init_diagram(self, sequence):
        self.sequence = sequence
        self.length = parse_length(sequence.length)
        self.draw()

    def update_options(self, **options):
        self.options.update(options)
        if self.sequence is not None:
            self.draw()

    @property
    def plot_width(self):
        return self.options['width'] - self.options['margin_left'] - self.options['margin_right']

    def x_scale(self, position):
        return self.options['margin_left'] + (position / self.length) * self.plot_width

    def draw(self):
        opts = self.options
        width, height = opts['width'], opts['height']

        self.figure = Figure(figsize=(width / DPI, height / DPI), dpi=DPI)
        self.figure.set_gid("mut-dia-svg")
        self.top_label = self.figure.text(
            opts['margin_left'] / width,
            1 - (opts['margin_top'] - 12) / height,
            "",
            family=opts['label_font'],
            fontsize=opts['top_label_font_size'],
            fontweight="bold",
            gid="mut-dia-top-label",
        )

        ax = self.figure.add_axes([
            opts['margin_left'] / width,
            opts['margin_bottom'] / height,
            self.plot_width / width,
            (height - opts['margin_top'] - opts['margin_bottom']) / height,
        ])
        ax.set_xlim(0, self.length)
        ax.set_ylim(REGION_BOTTOM, Y_TOP)
        ax.xaxis.set_major_locator(MaxNLocator(nbins=10, integer=True))
        ax.tick_params(axis='x', labelsize=opts['label_font_size'], colors="#666666")
        ax.set_xlabel("{} aa".format(self.length), fontsize=opts['label_font_size'], loc='right')
        ax.set_yticks([])
        for side in ('top', 'right', 'left'):
            ax.spines[side].set_visible(False)

        self._draw_backbone(ax)
        self.regions = self._draw_regions(ax) if opts['show_regions'] else []
        self.lollipops = self._draw_lollipops(ax)
        self._refresh()

    def _draw_backbone(self, ax):
        ax.add_patch(Rectangle(
            (0, BACKBONE_BOTTOM), self.length, BACKBONE_TOP - BACKBONE_BOTTOM,
            facecolor=self.options['backbone_color'], edgecolor="none",
            gid="mut-dia-background",
        ))

    def _draw_regions(self, ax):
        opts = self.options
        colors = opts['region_colors']
        regions = []

        for index, region in enumerate(self.sequence.regions):
            start, end = region['start'], region['end']
            name = region.get('name', "")
            ax.add_patch(Rectangle(
                (start, REGION_BOTTOM), end - start, REGION_TOP - REGION_BOTTOM,
                facecolor=colors[index % len(colors)], edgecolor="none",
                gid="mut-dia-region-{}".format(index),
            ))

            labelled = bool(name) and self.x_scale(end) - self.x_scale(start) > len(name) * 7
            if labelled:
                ax.text(
                    (start + end) / 2, (REGION_BOTTOM + REGION_TOP) / 2, name,
                    ha="center", va="center", color="#FFFFFF",
                    family=opts['label_font'], fontsize=opts['label_font_size'],
                    gid="mut-dia-region-label-{}".format(index),
                )
            regions.append({'name': name, 'start': start, 'end': end, 'labelled': labelled})

        return regions

    def _lollipop_color(self, mutations):
        counts = Counter(mutation.main_type for mutation in mutations)
        main_type = max(TYPE_PRIORITY, key=lambda t: (counts[t], -TYPE_PRIORITY.index(t)))
        return self.options['lollipop_colors'][main_type]

    def _draw_lollipops(self, ax):
        opts = self.options
        lollipops = OrderedDict()

        y_max = opts['y_max'] or self.mutations.max_count()
        if not y_max:
            return lollipops

        radius_min = opts['lollipop_radius_min']
        radius_max = opts['lollipop_radius_max']

        for position, mutations in self.mutations.by_position().items():
            if position < 1 or position > self.length:
                logger.debug("Mutation position %s outside of %s", position, self.gene_symbol)
                continue

            count = len(mutations)
            ratio = min(count, y_max) / y_max
            radius = radius_min + (radius_max - radius_min) * ratio
            color = self._lollipop_color(mutations)
            gid = "mut-dia-lollipop-{}".format(position)

            ax.vlines(position, 0, ratio, colors="#BABDB6", linewidth=1, gid=gid + "-line")
            ax.plot(
                [position], [ratio], marker="o", markersize=radius * 2,
                color=color, linestyle="none", gid=gid,
            )

            lollipops[position] = {
                'count': count,
                'radius': radius,
                'color': color,
                'protein_changes': sorted(set(m.protein_change for m in mutations if m.protein_change)),
            }

        return lollipops

    def update_top_label(self, text=""):
        self.top_label.set_text(text)
        self._refresh()

    def get_top_label(self):
        return self.top_label.get_text()

    def to_svg_string(self):
        return serialize(self.figure)

    def _refresh(self):
        if self.el is not None:
            svg_string = serialize(self.figure)
            # markup embedded in the page starts at the svg element
            self.el.update(svg_string[svg_string.index("<svg"):])


def serialize(figure):
    buf = BytesIO()
    with matplotlib.rc_context(SVG_RC):
        figure.savefig(buf, format="svg", metadata={'Date': None})
    return buf.getvalue().decode("utf-8")
