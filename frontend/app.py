# frontend/app.py
import streamlit as st

# Page configuration MUST be the first Streamlit command
st.set_page_config(
    page_title="Student Manager",
    page_icon="🎓",
    layout="wide"
)

import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app.client.api import StudentAPI
from app.client.state import GENDER_CHOICES, StudentForm, StudentManager
from app.core.config import settings


@st.cache_resource
def get_api():
    return StudentAPI(base_url=settings.API_BASE_URL, timeout=settings.CLIENT_TIMEOUT)


# Session state initialization: one manager per browser session
if "manager" not in st.session_state:
    st.session_state.manager = StudentManager(api=get_api())
    st.session_state.manager.load()
if "form_version" not in st.session_state:
    st.session_state.form_version = 0

manager: StudentManager = st.session_state.manager


def refresh_form():
    # New widget keys so the inputs pick up the manager's form values
    st.session_state.form_version += 1
    st.rerun()


def render_form():
    st.subheader(manager.form_title)
    version = st.session_state.form_version
    form = manager.form

    with st.form(key=f"student_form_{version}"):
        name = st.text_input("Name", value=form.name, placeholder="Enter full name")
        email = st.text_input("Email", value=form.email, placeholder="Enter email address")
        age = st.number_input(
            "Age",
            min_value=1,
            max_value=120,
            step=1,
            value=int(form.age) if form.age else None,
            placeholder="Enter age",
        )
        gender = st.selectbox(
            "Gender",
            GENDER_CHOICES,
            index=GENDER_CHOICES.index(form.gender) if form.gender in GENDER_CHOICES else None,
            placeholder="Select gender",
        )

        col_submit, col_cancel = st.columns([1, 1])
        submitted = col_submit.form_submit_button(manager.submit_label, disabled=manager.busy)
        cancelled = False
        if manager.editing:
            cancelled = col_cancel.form_submit_button("Cancel", disabled=manager.busy)

    if cancelled:
        manager.cancel()
        refresh_form()

    if submitted:
        if not (name and email and age and gender):
            st.warning("All fields (name, email, age, gender) are required")
            return
        manager.form = StudentForm(name=name, email=email, age=str(int(age)), gender=gender)
        if manager.submit():
            refresh_form()


def render_table():
    st.subheader("Student List")

    if manager.busy and not manager.students:
        st.info("Loading students...")
        return
    if not manager.students:
        st.info("No students found. Add a new student above.")
        return

    header = st.columns([3, 4, 1, 2, 2])
    for col, title in zip(header, ["Name", "Email", "Age", "Gender", "Actions"]):
        col.markdown(f"**{title}**")

    for student in manager.students:
        cols = st.columns([3, 4, 1, 2, 2])
        cols[0].write(student["name"])
        cols[1].write(student["email"])
        cols[2].write(student["age"])
        cols[3].write(student["gender"])

        edit_col, delete_col = cols[4].columns(2)
        if edit_col.button("Edit", key=f"edit_{student['id']}", disabled=manager.busy):
            manager.edit(student)
            refresh_form()
        if delete_col.button("Delete", key=f"delete_{student['id']}", disabled=manager.busy):
            manager.request_delete(student["id"])
            st.rerun()

        if manager.pending_delete_id == student["id"]:
            st.warning(f"Are you sure you want to delete {student['name']}?")
            yes_col, no_col = st.columns([1, 8])
            if yes_col.button("Yes, delete", key=f"confirm_{student['id']}"):
                manager.confirm_delete()
                st.rerun()
            if no_col.button("Cancel", key=f"cancel_delete_{student['id']}"):
                manager.cancel_delete()
                st.rerun()


st.title("Student Manager")

if manager.error:
    st.error(manager.error)
if manager.message:
    st.caption(manager.message)

render_form()
st.divider()
render_table()
