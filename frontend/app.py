import streamlit as st

from frontend.client import IdeaRequestError, format_hashtags, request_ideas

st.set_page_config(page_title="🎬 Viral Shorts Agent", layout="centered")

st.title("🎬 Viral Shorts Agent")
st.caption("AI-powered YouTube Shorts ideas that are scientifically designed to go viral")

niche = st.text_input(
    "Niche / Topic *",
    value="",
    placeholder="e.g., Tech Reviews, Cooking, Fitness, Comedy...",
)
trend = st.text_input(
    "Current Trend (Optional)",
    value="",
    placeholder="e.g., AI Tools, Viral Challenge, Breaking News...",
)

make_btn = st.button("✨ Generate Viral Ideas", type="primary", use_container_width=True)

if make_btn:
    if not niche.strip():
        st.error("Please enter a niche or topic")
        st.stop()

    with st.spinner("Generating Viral Ideas..."):
        try:
            ideas = request_ideas(niche, trend)
        except IdeaRequestError:
            st.error("Failed to generate ideas. Please try again.")
            st.stop()

    if ideas:
        st.header("🔥 Your Viral Video Ideas")

    for idea in ideas:
        with st.container(border=True):
            col1, col2 = st.columns([3, 1])
            with col1:
                st.subheader(idea.get("title", ""))
            with col2:
                st.metric("🎯 Viral Score", f"{idea.get('viralityScore', '')}%")

            st.write("**🎣 HOOK (First 3 seconds)**")
            st.info(idea.get("hook", ""))

            st.write("**📝 FULL SCRIPT**")
            st.text(idea.get("script", ""))

            st.write("**🧠 WHY THIS WILL GO VIRAL**")
            st.caption(idea.get("reasoning", ""))

            st.write("**#️⃣ HASHTAGS**")
            st.write(format_hashtags(idea.get("hashtags", [])))

st.divider()
st.caption("💡 Powered by AI • Generate unlimited viral video ideas • Stand out on YouTube Shorts")
