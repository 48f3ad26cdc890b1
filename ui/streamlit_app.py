import streamlit as st
import subprocess
import sys
import os
import time

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
# Ensure the project root is on sys.path so imports like `from config import settings` work
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
try:
    from config import settings
    from simulation.reports import load_perf_history
except Exception as e:
    # Provide a clearer error message in the UI if import fails
    raise ImportError(f"Failed to import project packages. Make sure you run Streamlit from the project root ({ROOT}). Original error: {e}")


def run_script_stream(args: list, timeout: int = 3600, text_area_height: int = 300):
    """Run a Python script and stream stdout/stderr lines back to the UI.

    Returns (returncode, full_output, elapsed_seconds)
    """
    cmd = [sys.executable] + args
    start = time.time()
    try:
        proc = subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, bufsize=1, text=True, cwd=ROOT)
    except OSError as e:
        return -2, str(e), 0

    out_buf = []
    placeholder = st.empty()
    for line in proc.stdout:
        out_buf.append(line)
        placeholder.text_area("Process output (live)", ''.join(out_buf), height=text_area_height)
        if time.time() - start > timeout:
            proc.kill()
            return -1, ''.join(out_buf) + f"\nTimeout after {timeout}s\n", timeout
    rc = proc.wait()
    return rc, ''.join(out_buf), time.time() - start


def resolve(path: str) -> str:
    return path if os.path.isabs(path) else os.path.join(ROOT, path)


def page_run_simulation():
    st.header("Run Simulation")
    c1, c2 = st.columns(2)
    nodes = c1.number_input("Nodes", min_value=1, value=settings.NUM_NODES)
    workers = c2.number_input("Workers", min_value=1, value=settings.NUM_WORKERS)
    tamper = c1.slider("Tamper %", 0.0, 100.0, float(settings.TAMPER_PERCENT), 0.5)
    fail = c2.slider("Drop %", 0.0, 100.0, float(settings.FAIL_PERCENT), 0.5)
    payload = c1.number_input("Payload bytes", min_value=0, value=settings.PAYLOAD_BYTES)
    jitter = c2.number_input("Node start jitter (ms)", min_value=0, value=settings.NODE_JITTER_MS)
    ta_node = st.slider("TA -> Node delay (ms)", 0, 500, settings.NET_TA_NODE_MS)
    node_mw = st.slider("Node -> MW delay (ms)", 0, 500, settings.NET_NODE_MW_MS)
    db = st.slider("DB delay (ms)", 0, 500, settings.DB_DELAY_MS)
    out_file = st.text_input("CSV output", settings.OUT_FILE)

    if st.button("Run run_sim.py"):
        args = [os.path.join(ROOT, 'run_sim.py'),
                '--nodes', str(nodes), '--workers', str(workers),
                '--tamper-percent', str(tamper), '--fail-percent', str(fail),
                '--payload-bytes', str(payload), '--node-jitter', str(jitter),
                '--net-ta-node', str(ta_node[0]), str(ta_node[1]),
                '--net-node-mw', str(node_mw[0]), str(node_mw[1]),
                '--db-delay', str(db[0]), str(db[1]),
                '--out', out_file]
        with st.spinner('Running simulation...'):
            code, out, elapsed = run_script_stream(args, timeout=1800, text_area_height=300)
        st.write(f"Return code: {code}  Elapsed: {elapsed:.1f}s")
        if out:
            st.text_area("Final output", out, height=300)


def page_perf_history():
    st.header("Performance History")
    out_file = st.text_input("CSV file", settings.OUT_FILE)
    df = load_perf_history(resolve(out_file))
    if df.empty:
        st.info(f"No runs recorded in {out_file} yet")
        return

    st.write(f"{len(df)} runs")
    st.dataframe(df)

    cols = st.columns(3)
    last = df.iloc[-1]
    cols[0].metric("Last avg (ms)", f"{last['Avg Total (us)'] / 1000.0:.2f}")
    cols[1].metric("Last success %", f"{last['Success %']:.2f}")
    cols[2].metric("Last wall time (s)", f"{last['Wall Time (s)']:.2f}")

    by_workers = df.groupby('Workers')[['Avg Total (us)', 'Median (us)', 'Wall Time (s)']].mean()
    st.subheader("Node time by worker count (us)")
    st.line_chart(by_workers[['Avg Total (us)', 'Median (us)']])
    st.subheader("Wall time by worker count (s)")
    st.bar_chart(by_workers[['Wall Time (s)']])


def page_summary_reports():
    st.header("Summary Reports")
    report_file = st.text_input("Report file", settings.REPORT_FILE)
    path = resolve(report_file)
    if os.path.exists(path):
        with open(path, 'r', encoding='utf-8', errors='ignore') as f:
            st.code(f.read())
    else:
        st.info(f"No report found at {path}")


def main():
    st.title("Token Authentication Simulator")
    st.sidebar.title("Navigation")
    page = st.sidebar.selectbox("Go to", ["Run Simulation", "Performance History", "Summary Reports"])

    if page == "Run Simulation":
        page_run_simulation()
    elif page == "Performance History":
        page_perf_history()
    else:
        page_summary_reports()


if __name__ == '__main__':
    main()
