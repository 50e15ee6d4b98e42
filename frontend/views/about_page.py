import streamlit as st

from frontend.constants import (
    BRAINROUTE_PLATFORM_URL,
    CONTACT_EMAILS,
    GITHUB_ISSUES_URL,
    GITHUB_REPOSITORY_URL,
    TEAM_MEMBERS,
)
from frontend.utils import build_mailto_link


def render_about_page():
    st.markdown("## ℹ️ About BrainRouteDB")
    st.markdown("A comprehensive database for Blood-Brain Barrier (BBB) permeability predictions.")

    st.markdown("### Project Overview")
    st.markdown(
        "BrainRouteDB is a specialized resource designed to assist researchers in drug discovery "
        "and development. It stores a growing, self-updating repository of BBB permeability "
        "predictions, offering consistency and reproducibility for future research.\n\n"
        "Machine learning models analyze molecular structures to predict their likelihood of "
        "crossing the BBB, helping scientists prioritize candidates early in the pipeline.\n\n"
        "The project was developed as part of the Omics Codeathon."
    )

    st.markdown("### Resources")
    col1, col2 = st.columns(2)
    with col1:
        st.link_button("GitHub Repository", GITHUB_REPOSITORY_URL, use_container_width=True)
    with col2:
        st.link_button("BrainRoute Platform", BRAINROUTE_PLATFORM_URL, use_container_width=True)

    st.markdown("### Team")
    cols = st.columns(3)
    for idx, member in enumerate(TEAM_MEMBERS):
        with cols[idx % 3]:
            with st.container(border=True):
                st.markdown(f"**{member['name']}**")
                st.caption(member['institution'])
                if member.get('github'):
                    st.markdown(f"[GitHub]({member['github']})")


def render_contact_page():
    st.markdown("## ✉️ Contact Us")
    st.markdown("Have questions about our data or models? We'd love to hear from you.")

    col_info, col_form = st.columns([1, 2])
    with col_info:
        st.markdown("#### General Inquiries")
        for email in CONTACT_EMAILS:
            st.markdown(f"[{email}](mailto:{email})")
        st.markdown("#### Technical Issues")
        st.caption("Found a bug or have a technical question? Please create an issue on GitHub.")
        st.link_button("Create Issue", GITHUB_ISSUES_URL)

    with col_form:
        st.markdown("#### Send us a Message")
        with st.form("contact_form"):
            name = st.text_input("Name")
            email = st.text_input("Email")
            subject = st.text_input("Subject")
            message = st.text_area("Message")
            submitted = st.form_submit_button("Prepare email", type="primary")

        if submitted:
            if not (name.strip() and email.strip() and message.strip()):
                st.warning("Please fill in your name, email and message.")
            else:
                link = build_mailto_link(CONTACT_EMAILS, subject, name, email, message)
                st.link_button("📨 Open in mail client", link)
