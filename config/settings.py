"""
Configuration file for the token authentication simulation

This file specifies all default parameters used across the project:
- Simulation settings
- Protocol / crypto settings
- Simulated network and storage delays
- Report output options
"""

#Simulation settings
NUM_NODES = 100 #Total number of simulated nodes per run
NUM_WORKERS = 2 #Concurrent worker threads (a weak CPU by default)
FALLBACK_NODES = 1000 #Used when a non-positive node count is supplied
FALLBACK_WORKERS = 1 #Used when a non-positive worker count is supplied
TAMPER_PERCENT = 0.0 #Chance (0 - 100) that a node's token gets replaced
FAIL_PERCENT = 0.0 #Chance (0 - 100) that a node's request is dropped
PAYLOAD_BYTES = 500 #Body size of the node -> MW request
SEED_SALT = 7919 #Per-worker salt XORed into the base seed

#Protocol Settings
KEY_SIZE = 16 #Bytes, AES-128 keys truncated from SHA-256
IV_SIZE = 16 #AES block size
TOKEN_SIZE = 16 #Random bytes per issued token (32 hex chars)
WIRE_SEPARATOR = ":" #Between hex(IV) and hex(ciphertext)
NODE_ID_BASE = "node-"

#Static passphrases for the three logical channels
PASSPHRASE_TA_NODE = "passphrase_ta_node_v1"
PASSPHRASE_NODE_MW = "passphrase_node_mw_v1"
PASSPHRASE_TA_MW = "passphrase_ta_mw_v1"

#Simulated delays, milliseconds (min, max) inclusive
NODE_JITTER_MS = 50 #Upper bound for staggered node start
NET_TA_NODE_MS = (5, 20) #LAN delay TA -> Node
NET_NODE_MW_MS = (5, 20) #LAN delay Node -> MW
DB_DELAY_MS = (10, 30) #Slow DB / processing after validation

#Report output
OUT_FILE = "realistic_perf.csv" #Appended CSV row per run
REPORT_FILE = "final.txt" #Appended human readable summary per run
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
CSV_COLUMNS = [
    "Timestamp", "Nodes", "Workers", "Avg Total (us)", "Min (us)", "Max (us)",
    "Median (us)", "Success %", "Dropped %", "Wall Time (s)",
]
