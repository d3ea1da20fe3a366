# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See LICENSE in the project root
# for license information.

"""Style sheet and script shared by all html fragments on a page."""

STYLE_SHEET = """
<style>
    .vdump {
        --vdump-primary: #007bff;
        --vdump-border: #dee2e6;
        --vdump-muted: #6c757d;
        --vdump-mono: "JetBrains Mono", "Fira Code", "SF Mono", Consolas, Menlo, monospace;
        background: #f8f9fa;
        border: 1px solid var(--vdump-border);
        border-radius: 8px;
        padding: 12px 16px;
        margin: 12px 0;
        font: 13px/1.3 var(--vdump-mono);
        color: #212529;
        overflow-x: auto;
        white-space: pre;
    }
    .vdump-line {
        display: block;
    }
    .vdump-item {
        display: inline;
    }
    .vdump-expandable {
        cursor: pointer;
        user-select: none;
    }
    .vdump-toggle {
        display: inline-block;
        width: 14px;
        margin-right: 6px;
        text-align: center;
        color: #fff;
        background: var(--vdump-primary);
        border-radius: 50%;
        font-weight: bold;
    }
    .vdump-content {
        display: block;
        margin-left: 16px;
        padding-left: 10px;
        border-left: 2px solid rgba(0, 123, 255, 0.2);
    }
    .vdump-collapsed > .vdump-content {
        display: none;
    }
    .vdump-key {
        font-weight: 600;
    }
    .vdump-length,
    .vdump-type {
        color: var(--vdump-muted);
        font-size: 11px;
        font-style: italic;
        margin-left: 6px;
    }
    .vdump-protected {
        opacity: 0.75;
    }
    .vdump-private {
        opacity: 0.6;
        font-style: italic;
    }
    .vdump-location {
        display: flex;
        gap: 8px;
        margin-bottom: 10px;
        padding: 6px 10px;
        border: 1px solid rgba(0, 123, 255, 0.2);
        border-radius: 6px;
        background: rgba(0, 123, 255, 0.08);
        font-size: 12px;
    }
    .vdump-location-scope {
        font-weight: 600;
        color: var(--vdump-primary);
    }
    .vdump-location-path {
        margin-left: auto;
        opacity: 0.6;
    }
</style>
"""

SCRIPT = """
<script>
    function vdumpToggle(id) {
        const element = document.getElementById("vdump-" + id);
        if (!element) {
            return;
        }
        const toggle = element.querySelector(".vdump-toggle");
        const collapsed = element.classList.toggle("vdump-collapsed");
        if (toggle) {
            toggle.textContent = collapsed ? "+" : "−";
        }
    }
</script>
"""
