import plotly.graph_objects as go

import settings
from pyramid_scales import axis_ticks


class BarGroup:
    """One drawn age-bracket row: female bar, male bar and the centred label."""

    def __init__(self, entry):
        self.label = entry.label
        self.apply(entry)

    def apply(self, entry):
        self.y = entry.y
        self.female_width = entry.female_width
        self.male_width = entry.male_width


class PyramidSurface:
    """
    Keeps the bar groups that are currently drawn, keyed by age bracket,
    and turns them into a Plotly figure.
    """

    def __init__(self):
        self.groups = {}
        self.title = ''
        self.slider_value = None

    def keys(self):
        return list(self.groups)

    def create(self, entry):
        self.groups[entry.key] = BarGroup(entry)

    def update(self, entry):
        self.groups[entry.key].apply(entry)

    def remove(self, key):
        del self.groups[key]

    def ordered_groups(self):
        return sorted(self.groups.values(), key=lambda g: g.y)


def create_empty_figure(title_text):
    """
    Create an empty Plotly figure with title and hidden axes.
    """
    fig = go.Figure()
    fig.update_layout(
        title=title_text,
        xaxis={'visible': False},
        yaxis={'visible': False},
        template=settings.PLOTLY_TEMPLATE,
        font={'family': settings.FONT_FAMILY}
    )
    return fig


def build_figure(surface, scales):
    """Render the surface: female bars left of the labels, male bars right."""
    groups = surface.ordered_groups()
    if not groups:
        return create_empty_figure(f"{surface.title}<br>No data for this year.")

    offset = settings.CENTER_OFFSET
    bar_height = settings.BAR_HEIGHT
    ys = [g.y + bar_height / 2 for g in groups]
    labels = [g.label for g in groups]

    fig = go.Figure()
    # Bars grow outwards from the gap around the labels
    fig.add_trace(go.Bar(
        y=ys,
        x=[g.female_width for g in groups],
        base=-offset,
        orientation='h',
        width=bar_height - 1,
        name='Female',
        marker_color=settings.COLOR_FEMALE,
        customdata=labels,
        hovertemplate="<b>Age: %{customdata}</b><br>Female width: %{x:.1f}px<extra></extra>"
    ))
    fig.add_trace(go.Bar(
        y=ys,
        x=[g.male_width for g in groups],
        base=offset,
        orientation='h',
        width=bar_height - 1,
        name='Male',
        marker_color=settings.COLOR_MALE,
        customdata=labels,
        hovertemplate="<b>Age: %{customdata}</b><br>Male width: %{x:.1f}px<extra></extra>"
    ))
    fig.add_trace(go.Scatter(
        y=ys,
        x=[0] * len(groups),
        mode='text',
        text=labels,
        textfont={'color': settings.COLOR_LABEL, 'size': 11},
        hoverinfo='skip',
        showlegend=False
    ))

    female_pos, female_text = axis_ticks(scales.female, -offset, settings.TICK_COUNT)
    male_pos, male_text = axis_ticks(scales.male, offset, settings.TICK_COUNT)
    extent = settings.BAR_WIDTH + offset

    fig.update_layout(
        title=surface.title,
        barmode='overlay',
        bargap=0,
        xaxis={
            'range': [-extent, extent],
            'tickvals': female_pos + male_pos,
            'ticktext': female_text + male_text,
            'showgrid': True,
            'zeroline': False,
        },
        yaxis={
            'range': [len(groups) * bar_height, 0],
            'visible': False,
        },
        height=len(groups) * bar_height + 160,
        template=settings.PLOTLY_TEMPLATE,
        legend={'orientation': 'h', 'y': -0.08, 'x': 0.5, 'xanchor': 'center'},
        font={'family': settings.FONT_FAMILY},
        margin={'l': 40, 'r': 20, 't': 60, 'b': 40}
    )
    return fig
