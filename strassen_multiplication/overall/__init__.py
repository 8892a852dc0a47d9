"""Reference multipliers and the naive-vs-Strassen benchmark."""
