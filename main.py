from __future__ import annotations
import streamlit as st
import re
import logging
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt
import networkx as nx
import io

from docsum.config import DocsumConfig, configure_logging
from docsum.datatypes import CooccurrenceGraph, HITSScores
from docsum.preprocessing import default_stopwords, load_stopwords, preprocess_sentences, segment, original_sentences
from docsum.features import extract_features
from docsum.graphing import build_graph, to_networkx
from docsum.scoring import score_sentences, run_hits, rank_scores
from docsum.summarize import select_sentences, select_keywords, summary_length, build_summary, format_keywords, summarize, extract_keywords

logger = logging.getLogger(__name__)

def extract_markdown_text(md_content: str) -> str:
    """Strip the Markdown markup that would otherwise end up as tokens."""
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    text = re.sub(r'(\*{1,2}|_{1,2}|`)(.*?)\1', r'\2', text)
    return text.strip()

def load_text_from_file(uploaded_file) -> str:
    content = uploaded_file.read().decode("utf-8")
    if uploaded_file.name.lower().endswith(".md"):
        return extract_markdown_text(content)
    return content

def draw_cooccurrence_graph(graph: CooccurrenceGraph, scores: HITSScores, max_nodes: int = 40):
    """Draw the strongest part of the word graph; node size follows the combined HITS score."""
    G = to_networkx(graph)
    combined = scores.combined()
    keep = sorted(G.nodes, key=lambda i: combined[i], reverse=True)[:max_nodes]
    H = G.subgraph(keep)

    fig, ax = plt.subplots(figsize=(10, 8))
    ax.set_title("Word Co-occurrence Graph", fontsize=14, fontweight='bold')
    if len(H.nodes) > 0:
        pos = nx.spring_layout(H, k=1.5, iterations=50, seed=42)
        peak = max(combined[i] for i in H.nodes) or 1.0
        sizes = [300 + 1500 * combined[i] / peak for i in H.nodes]
        nx.draw_networkx_nodes(H, pos, ax=ax, node_color='lightblue', node_size=sizes, alpha=0.8)
        nx.draw_networkx_edges(H, pos, ax=ax, alpha=0.4, edge_color='gray', arrows=True, arrowsize=10)
        nx.draw_networkx_labels(H, pos, {i: graph.terms[i] for i in H.nodes}, ax=ax, font_size=9)
    ax.axis('off')
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close()
    return buf

def create_sidebar_controls(config: DocsumConfig):
    st.sidebar.header("Parameters")
    percentage = st.sidebar.slider(
        "Summary length (%)",
        min_value=0,
        max_value=100,
        value=config.percentage,
        step=5,
        help="Share of the original sentences kept in the summary"
    )
    keyword_limit = st.sidebar.number_input(
        "Keywords", min_value=1, max_value=100, value=config.keyword_limit, step=1
    )
    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=True, help="Show detailed pipeline steps")
    return percentage, int(keyword_limit), debug_mode

def _preview(text: str, width: int = 80) -> str:
    text = text.strip()
    return text[:width] + "..." if len(text) > width else text

def debug_pipeline(text: str, stopwords, percentage: int, keyword_limit: int, iterations: int):
    """Run both pipelines step by step and show the intermediate values."""

    # Step 1: Pre-processing
    st.header("Step 1: Pre-processing")
    with st.expander("Pre-processing Details", expanded=True):
        st.write("**Running:** Sentence segmentation, lower-casing, punctuation and stop-word removal")
        doc = segment(text)
        processed = preprocess_sentences(doc.token_lists(), stopwords)
        raw_tokens = sum(len(s.tokens) for s in doc.sentences)
        kept_tokens = sum(len(s) for s in processed)

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Total Sentences", len(doc.sentences))
        with col2:
            st.metric("Tokens (raw)", raw_tokens)
        with col3:
            st.metric("Tokens (processed)", kept_tokens)

        st.dataframe(pd.DataFrame([{
            "Sentence #": s.idx + 1,
            "Original Text": _preview(s.text),
            "Processed Tokens": ", ".join(processed[s.idx][:10]) + ("..." if len(processed[s.idx]) > 10 else ""),
        } for s in doc.sentences]), use_container_width=True)

    # Step 2: Term model and centroid
    st.header("Step 2: Term Model & Centroid")
    with st.expander("Centroid Details", expanded=True):
        feats, model, centroid = extract_features(processed)
        st.write(f"**Centroid document ({len(centroid.terms)} of {len(model.vocabulary)} terms):** "
                 + (", ".join(centroid.terms) or "none"))
        if model.vocabulary:
            terms_df = pd.DataFrame([{
                "Term": t,
                "Doc Frequency": len(model.doc_freq[t]),
                "Avg Frequency": round(model.avg_freq[t], 4),
                "Centroid Weight": round(centroid.weights[i], 4),
                "In Centroid": "yes" if t in centroid.terms else "",
            } for i, t in enumerate(model.vocabulary)])
            st.dataframe(terms_df.sort_values("Centroid Weight", ascending=False, kind="stable"),
                         use_container_width=True, height=250)

    # Step 3: Sentence scoring and selection
    st.header("Step 3: Sentence Scoring & Selection")
    with st.expander("Scoring Details", expanded=True):
        scored = score_sentences(feats)
        selection = select_sentences(scored, percentage)
        k = summary_length(len(scored), percentage)
        st.dataframe(pd.DataFrame([{
            "Sentence #": s.idx + 1,
            "Centroid": round(feats[s.idx]["centroid"], 4),
            "Position": round(feats[s.idx]["position"], 4),
            "First Overlap": feats[s.idx]["first_overlap"],
            "Score": round(s.score, 4),
            "Selected": "yes" if s.idx in selection else "",
        } for s in scored]), use_container_width=True)

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Target Sentences", k)
        with col2:
            st.metric("Mean Score", f"{np.mean([s.score for s in scored]):.3f}" if scored else "-")
        with col3:
            st.metric("Actual Ratio", f"{len(selection) / len(scored):.2%}" if scored else "-")

    # Step 4: Co-occurrence graph and HITS
    st.header("Step 4: Co-occurrence Graph & HITS")
    with st.expander("Keyword Details", expanded=True):
        graph = build_graph(processed, model.vocabulary)
        scores = run_hits(graph, iterations=iterations)
        ranked = rank_scores(scores)
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Nodes (Terms)", len(graph.nodes))
        with col2:
            st.metric("Edges", len(graph.edges))

        if graph.nodes:
            combined = scores.combined()
            st.dataframe(pd.DataFrame([{
                "Rank": r + 1,
                "Term": graph.terms[i],
                "Authority": round(scores.authority[i], 4),
                "Hub": round(scores.hub[i], 4),
                "Score": round(combined[i], 4),
                "In": len(graph.nodes[i].incoming),
                "Out": len(graph.nodes[i].outgoing),
            } for r, i in enumerate(ranked)]), use_container_width=True, height=250)
            try:
                st.image(draw_cooccurrence_graph(graph, scores), caption="Top terms by HITS score")
            except Exception as e:
                logger.exception("Graph drawing failed")
                st.error(f"Could not generate graph visualization: {str(e)}")

    summary = build_summary(original_sentences(text), selection)
    keywords = select_keywords(ranked, model.vocabulary, keyword_limit)
    return summary, keywords

def run_simple(text: str, stopwords, percentage: int, keyword_limit: int):
    summary = summarize(text, percentage=percentage, stopwords=stopwords)
    return summary, extract_keywords(text, limit=keyword_limit, stopwords=stopwords)

def main():
    config = DocsumConfig.from_env()
    configure_logging(config.log_level)

    st.title("Document Summarizer")
    st.write("Upload a text file to generate a centroid-based summary and HITS keywords")

    percentage, keyword_limit, debug_mode = create_sidebar_controls(config)
    stopwords = load_stopwords(config.stopwords_path) if config.stopwords_path else default_stopwords()
    if not stopwords:
        st.warning("Stop-word list unavailable; all words are kept")

    uploaded_file = st.file_uploader("Choose a text file", type=['txt', 'md'])
    if uploaded_file is None:
        return

    text = load_text_from_file(uploaded_file)
    st.subheader("Original Text")
    st.text_area("Content", text, height=200, disabled=True)

    if st.button("Generate Summary", type="primary"):
        try:
            if debug_mode:
                st.markdown("---")
                st.title("Pipeline Debug Mode")
                summary, keywords = debug_pipeline(text, stopwords, percentage, keyword_limit, config.iterations)
            else:
                with st.spinner("Generating summary..."):
                    summary, keywords = run_simple(text, stopwords, percentage, keyword_limit)
        except Exception as e:
            logger.exception("Summarization failed")
            st.error(f"Error generating summary: {str(e)}")
            return

        st.markdown("---")
        st.header("Final Summary")
        st.text_area("Generated Summary", summary, height=150, disabled=True)
        st.header("Keywords")
        st.write(format_keywords(keywords))
        st.download_button("Save summary", summary, file_name="summary.txt", mime="text/plain")

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Original Length", len(text.split()))
        with col2:
            st.metric("Summary Length", len(summary.split()))
        with col3:
            compression = len(summary.split()) / len(text.split()) if text.split() else 0
            st.metric("Actual Compression", f"{compression:.2%}")

if __name__ == "__main__":
    main()
