import plotly.express as px
import pandas as pd

from .const import GROUP_COLORS, DEFAULT_GROUP_COLOR
from .grouping import catalog_frame

GENERAL_LABEL = '(general)'


class CatalogVisualizer:
    def __init__(self, exercises, view):
        self.exercises = exercises
        self.view = view
        self.df = catalog_frame(exercises)

    def group_color(self, group):
        return GROUP_COLORS.get(group, DEFAULT_GROUP_COLOR)

    def create_group_size_chart(self):
        """
        Bar chart of how many exercises are listed under each group,
        following the visible group order.
        """
        if not self.view.order:
            return None

        counts = pd.DataFrame({
            'group': self.view.order,
            'exercises': [len(self.view.groups[g]) for g in self.view.order],
        })

        fig = px.bar(
            counts,
            x='group',
            y='exercises',
            color='group',
            title='Exercises per Muscle Group',
            color_discrete_map={g: self.group_color(g) for g in self.view.order},
            category_orders={'group': self.view.order},
            text='exercises',
            labels={'exercises': 'Exercises', 'group': 'Group'}
        )

        fig.update_traces(textposition='inside', textfont_size=16, hovertemplate='%{y} exercises')
        fig.update_layout(
            autosize=True,
            height=400,
            xaxis=dict(title=None),
            showlegend=False
        )

        return fig

    def create_subregion_chart(self, group):
        """
        Horizontal bar chart of exercise counts per subregion of one group.
        Targets without a subregion are counted under '(general)'.
        """
        plot_data = self.df[self.df['group'] == group].copy()
        if plot_data.empty:
            return None

        plot_data['subregion'] = plot_data['subregion'].replace('', GENERAL_LABEL)
        # An exercise hitting the same subregion twice still counts once
        coverage = (
            plot_data.drop_duplicates(['exercise', 'subregion'])
            .groupby('subregion')['exercise']
            .nunique()
            .reset_index(name='exercises')
            .sort_values(['exercises', 'subregion'], ascending=[True, False])
        )

        fig = px.bar(
            coverage,
            x='exercises',
            y='subregion',
            orientation='h',
            title=f"Subregion Coverage: {group}",
            color_discrete_sequence=[self.group_color(group)],
            text='exercises',
            labels={'exercises': 'Exercises', 'subregion': 'Subregion'}
        )

        fig.update_traces(textposition='inside', hovertemplate='%{x} exercises<extra></extra>')
        fig.update_layout(
            height=max(250, 40 * len(coverage) + 120),
            yaxis=dict(title=None),
            margin=dict(l=40, r=40, t=50, b=20)
        )

        return fig
