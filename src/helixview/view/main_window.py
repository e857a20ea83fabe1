"""
Main Application Window
=======================
The primary GUI container: input form on the left, the helix canvas on the
right, status bar with generation progress at the bottom.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the form and menu actions to the GenerationWorker and
   the worker's signals back to the canvas.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QFormLayout, QGroupBox, QHBoxLayout, QLabel, QLineEdit, QMainWindow, QProgressBar,
    QPushButton, QSpinBox, QSplitter, QVBoxLayout, QWidget
)

from helixview.config import DEFAULT_GENERATION, DEFAULT_INTERACTION, GenerationSettings, InteractionSettings
from helixview.controller.interaction import InteractionController
from helixview.controller.workers import GenerationWorker
from helixview.model.scene import MolecularScene, Variant
from helixview.view.widgets.helix_canvas import HelixCanvas

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Helix View"
MAX_GENOMIC_POSITION = 2_000_000_000
CONTEXT_FLANK = 3


class MainWindow(QMainWindow):
    def __init__(
        self,
        generation: GenerationSettings = DEFAULT_GENERATION,
        interaction: InteractionSettings = DEFAULT_INTERACTION,
    ) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 800)
        self.generation_settings = generation

        # --- MAIN CONTAINER ---
        splitter = QSplitter(Qt.Orientation.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Controls ---
        splitter.addWidget(self._build_controls())

        # --- RIGHT SIDE: Header + Canvas ---
        right = QWidget()
        right_layout = QVBoxLayout(right)
        right_layout.setContentsMargins(0, 0, 0, 0)

        self.lbl_title = QLabel()
        self.lbl_title.setStyleSheet("font-size: 18px; font-weight: bold;")
        self.lbl_subtitle = QLabel()
        self.lbl_context = QLabel()
        self.lbl_context.setStyleSheet("font-family: monospace;")
        for lbl in (self.lbl_title, self.lbl_subtitle, self.lbl_context):
            right_layout.addWidget(lbl)

        self.canvas = HelixCanvas(InteractionController(settings=interaction))
        right_layout.addWidget(self.canvas, 1)
        splitter.addWidget(right)
        splitter.setSizes([300, 900])

        # --- STATUS BAR ---
        self.progress = QProgressBar()
        self.progress.setRange(0, 100)
        self.progress.setMaximumWidth(200)
        self.progress.setVisible(False)
        self.statusBar().addPermanentWidget(self.progress)

        # --- WORKER ---
        self.worker = GenerationWorker(settings=generation, parent=self)
        self.worker.progress_updated.connect(self.on_progress)
        self.worker.pending_changed.connect(self.on_pending_changed)
        self.worker.scene_ready.connect(self.on_scene_ready)
        self.worker.error_occurred.connect(self.on_error)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # Initial render: wild type around the default position
        self.on_show_wild_type()

    # ------------------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------------------

    def _build_controls(self) -> QWidget:
        panel = QWidget()
        layout = QVBoxLayout(panel)

        grp_input = QGroupBox("Variant")
        form = QFormLayout(grp_input)

        self.edit_gene = QLineEdit("BRCA1")
        form.addRow("Gene:", self.edit_gene)

        self.spin_position = QSpinBox()
        self.spin_position.setRange(1, MAX_GENOMIC_POSITION)
        self.spin_position.setValue(self.generation_settings.default_position)
        self.spin_position.setGroupSeparatorShown(True)
        form.addRow("Position:", self.spin_position)

        self.edit_ref = QLineEdit("G")
        form.addRow("Ref:", self.edit_ref)
        self.edit_alt = QLineEdit("A")
        form.addRow("Alt:", self.edit_alt)

        self.spin_window = QSpinBox()
        self.spin_window.setRange(1, 60)
        self.spin_window.setValue(self.generation_settings.window_steps)
        self.spin_window.setSuffix(" bp")
        form.addRow("Window:", self.spin_window)

        layout.addWidget(grp_input)

        self.btn_variant = QPushButton("Show variant")
        self.btn_variant.setMinimumHeight(36)
        self.btn_variant.clicked.connect(self.on_show_variant)
        layout.addWidget(self.btn_variant)

        self.btn_wild_type = QPushButton("Wild type")
        self.btn_wild_type.clicked.connect(self.on_show_wild_type)
        layout.addWidget(self.btn_wild_type)

        grp_view = QGroupBox("View")
        row = QHBoxLayout(grp_view)
        self.btn_zoom_in = QPushButton("+")
        self.btn_zoom_out = QPushButton("-")
        self.btn_reset = QPushButton("Reset")
        row.addWidget(self.btn_zoom_in)
        row.addWidget(self.btn_zoom_out)
        row.addWidget(self.btn_reset)
        layout.addWidget(grp_view)

        layout.addStretch()
        return panel

    def _create_actions(self) -> None:
        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        self.act_zoom_in = QAction("Zoom In", self)
        self.act_zoom_in.setShortcut("Ctrl++")
        self.act_zoom_in.triggered.connect(self.canvas.zoom_in)

        self.act_zoom_out = QAction("Zoom Out", self)
        self.act_zoom_out.setShortcut("Ctrl+-")
        self.act_zoom_out.triggered.connect(self.canvas.zoom_out)

        self.act_reset_view = QAction("Reset View", self)
        self.act_reset_view.setShortcut("Ctrl+0")
        self.act_reset_view.triggered.connect(self.canvas.reset_view)

        self.btn_zoom_in.clicked.connect(self.canvas.zoom_in)
        self.btn_zoom_out.clicked.connect(self.canvas.zoom_out)
        self.btn_reset.clicked.connect(self.canvas.reset_view)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_exit)

        view_menu = menu_bar.addMenu("&View")
        view_menu.addAction(self.act_zoom_in)
        view_menu.addAction(self.act_zoom_out)
        view_menu.addSeparator()
        view_menu.addAction(self.act_reset_view)

    # ------------------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------------------

    def current_variant(self) -> Optional[Variant]:
        ref = self.edit_ref.text().strip().upper()
        alt = self.edit_alt.text().strip().upper()
        if not ref and not alt:
            return None
        return Variant(
            ref=ref,
            alt=alt,
            gene_label=self.edit_gene.text().strip(),
            position=self.spin_position.value(),
        )

    def on_show_variant(self) -> None:
        variant = self.current_variant()
        if variant is None:
            self.statusBar().showMessage("Enter a reference or alternate allele.", 5000)
            return
        logger.info(f"Showing variant {variant.label} at {variant.position}.")
        self.worker.request(self.spin_position.value(), variant, self.spin_window.value())

    def on_show_wild_type(self) -> None:
        self.worker.request(self.spin_position.value(), None, self.spin_window.value())

    def on_progress(self, percentage: int, message: str) -> None:
        self.progress.setValue(percentage)
        if message:
            self.statusBar().showMessage(message)
        else:
            self.statusBar().clearMessage()

    def on_pending_changed(self, pending: bool) -> None:
        self.progress.setVisible(pending)
        self.canvas.set_generation_pending(pending)

    def on_scene_ready(self, scene: MolecularScene) -> None:
        self.canvas.set_scene(scene)
        if scene.is_empty and self.worker.pending:
            return
        self._update_header(scene)

    def on_error(self, message: str) -> None:
        self.statusBar().showMessage(f"Generation failed: {message}", 10000)

    def _update_header(self, scene: MolecularScene) -> None:
        gene = self.edit_gene.text().strip() or "Unknown gene"
        variant = scene.variant
        if variant is not None:
            self.lbl_title.setText(variant.gene_label or gene)
            self.lbl_subtitle.setText(f"MOLECULAR VIEW • VAR: {variant.label}")
            self.lbl_context.setText(f"Context: ...{scene.context_sequence(CONTEXT_FLANK)}...")
        else:
            self.lbl_title.setText(gene)
            self.lbl_subtitle.setText("MOLECULAR VIEW • WILD TYPE")
            self.lbl_context.setText("")
