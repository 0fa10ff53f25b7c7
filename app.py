import html

import streamlit as st
from exercise_catalog.data_loader import CatalogLoader
from exercise_catalog.csv_parser import FormatError
from exercise_catalog.grouping import index_by_group, targets_for_group
from exercise_catalog.visualizations import CatalogVisualizer
from exercise_catalog.const import GROUP_ORDER

# Page Config
st.set_page_config(page_title="Exercises", page_icon="🏋️‍♂️", layout="wide")

@st.cache_data
def load_data():
    loader = CatalogLoader()
    try:
        return loader.load_all(), None
    except (FileNotFoundError, FormatError) as e:
        return None, str(e)

exercises, load_error = load_data()

st.title("Exercises by Muscle Group")

if load_error:
    st.error(f"Could not load exercises.csv:\n{load_error}")
    st.stop()

if not exercises:
    st.info("No exercises found.")
    st.stop()

# Sidebar
st.sidebar.title("Exercises")
st.sidebar.markdown("Browse the exercise catalog by muscle group.")

# Group order preference: defaults first, then anything else the catalog mentions
seen_groups = list(dict.fromkeys(t.group for e in exercises for t in e.targets))
order_options = GROUP_ORDER + [g for g in seen_groups if g not in GROUP_ORDER]
preferred_order = st.sidebar.multiselect(
    "Group Order",
    order_options,
    default=GROUP_ORDER,
    help="Selected groups are shown first, in the order picked. Others follow as they appear in the catalog."
)

view = index_by_group(exercises, preferred_order)
viz = CatalogVisualizer(exercises, view)

# KPI Row
col1, col2, col3 = st.columns(3)
col1.metric("Exercises", len(exercises))
col2.metric("Muscle Groups", len(view.order))
col3.metric("Targets", sum(len(e.targets) for e in exercises))

# Records without any group never show up under a heading
ungrouped = [e.name for e in exercises if not e.targets]
if ungrouped:
    st.warning(
        f"⚠️ Found {len(ungrouped)} exercises without a muscle group: "
        f"{', '.join(ungrouped)}. Please update `exercises.csv`."
    )

st.divider()

def render_chips(targets, color):
    chips = [
        f"<span style='background:{color};color:#111;border-radius:999px;"
        f"padding:1px 8px;margin-right:6px;font-size:0.8em'>{html.escape(t.subregion)}</span>"
        for t in targets if t.subregion
    ]
    if chips:
        st.markdown(''.join(chips), unsafe_allow_html=True)

def select_exercise(name):
    st.toast(f"Selected {name}")

# Group Listing
for group in view.order:
    items = view.groups[group]
    with st.expander(f"**{group}** · {len(items)}"):
        for i, exercise in enumerate(items):
            st.button(
                f"🏋️ {exercise.name}",
                key=f"{group}-{i}-{exercise.name}",
                on_click=select_exercise,
                args=(exercise.name,)
            )
            # Subregion chips for this group only
            render_chips(targets_for_group(exercise, group), viz.group_color(group))

st.divider()

st.subheader("Catalog Coverage")
fig_groups = viz.create_group_size_chart()
if fig_groups:
    st.plotly_chart(fig_groups, use_container_width=True)

selected_group = st.selectbox("Select Muscle Group", view.order)
fig_sub = viz.create_subregion_chart(selected_group)
if fig_sub:
    st.plotly_chart(fig_sub, use_container_width=True)
else:
    st.info(f"No data available for {selected_group}.")
