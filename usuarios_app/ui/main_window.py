"""Ventana principal de la aplicación."""

from __future__ import annotations

from typing import List, Optional, Tuple

from PyQt6.QtCore import QEvent, QObject, Qt
from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QStackedWidget,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from usuarios_app.core.controller import ScreenController
from usuarios_app.core.state import EstadoPantalla, Fase
from usuarios_app.models.user import User
from usuarios_app.ui.avatars import AvatarRenderer, CargadorImagenes
from usuarios_app.ui.rendering import FilaUsuario, construir_filas


class _FilaWidget(QWidget):
    """Nombre completo a la izquierda y avatar a la derecha."""

    def __init__(self, fila: FilaUsuario, avatar: QWidget) -> None:
        super().__init__()
        self.setObjectName("filaUsuario")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        self.lbl_nombre = QLabel(fila.nombre)
        self.lbl_nombre.setObjectName("nombreUsuario")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.addWidget(self.lbl_nombre)
        layout.addStretch(1)
        layout.addWidget(avatar)


class MainWindow(QMainWindow):
    """Lista de usuarios aleatorios con recarga y botón flotante para agregar."""

    PAGE_LOADING = 0
    PAGE_LIST = 1
    # desplazamiento acumulado de rueda, en la parte superior, que cuenta como tirón
    PULL_THRESHOLD = 360
    FAB_SIZE = 60
    FAB_MARGIN = 20

    def __init__(
        self,
        *,
        controller: ScreenController,
        avatar_renderer: AvatarRenderer,
        imagenes: Optional[CargadorImagenes] = None,
    ) -> None:
        super().__init__()
        self.controller = controller
        self.avatar_renderer = avatar_renderer
        self.imagenes = imagenes
        self._usuarios_renderizados: Tuple[User, ...] | None = None
        self._pull_acumulado = 0

        self.setWindowTitle("Usuarios aleatorios")
        self.resize(420, 720)

        self._build_ui()
        self._apply_styles()

        self.controller.suscribir(self._render)
        self._render(self.controller.estado)
        self.controller.montar()

    # ------------------------------------------------------------------ UI
    def _build_ui(self) -> None:
        self.stack = QStackedWidget()

        # ---------- página de carga inicial ----------
        loading_page = QWidget()
        loading_layout = QVBoxLayout(loading_page)
        self.loading_bar = QProgressBar()
        self.loading_bar.setObjectName("loadingBar")
        self.loading_bar.setRange(0, 0)
        self.loading_bar.setTextVisible(False)
        self.loading_bar.setFixedWidth(160)
        loading_layout.addStretch(1)
        loading_layout.addWidget(self.loading_bar, alignment=Qt.AlignmentFlag.AlignCenter)
        loading_layout.addStretch(1)

        # ---------- página de la lista ----------
        self.list_page = QWidget()
        list_layout = QVBoxLayout(self.list_page)
        list_layout.setContentsMargins(16, 16, 16, 16)
        list_layout.setSpacing(8)

        top_bar = QHBoxLayout()
        top_bar.addWidget(QLabel("Usuarios"))
        top_bar.addStretch(1)
        self.refresh_button = QPushButton("Recargar")
        self.refresh_button.setToolTip("Recargar la lista (F5)")
        self.refresh_button.clicked.connect(self._on_refresh)
        top_bar.addWidget(self.refresh_button)

        self.refresh_bar = QProgressBar()
        self.refresh_bar.setObjectName("refreshBar")
        self.refresh_bar.setRange(0, 0)
        self.refresh_bar.setTextVisible(False)
        self.refresh_bar.setFixedHeight(4)
        self.refresh_bar.setVisible(False)

        self.list_widget = QListWidget()
        self.list_widget.setSpacing(4)
        self.list_widget.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self.list_widget.setVerticalScrollMode(QListWidget.ScrollMode.ScrollPerPixel)
        self.list_widget.viewport().installEventFilter(self)

        list_layout.addLayout(top_bar)
        list_layout.addWidget(self.refresh_bar)
        list_layout.addWidget(self.list_widget)

        # botón flotante, reposicionado en cada Resize de la página
        self.list_page.installEventFilter(self)
        self.fab = QToolButton(self.list_page)
        self.fab.setObjectName("fab")
        self.fab.setText("+")
        self.fab.setToolTip("Agregar un usuario")
        self.fab.setFixedSize(self.FAB_SIZE, self.FAB_SIZE)
        self.fab.clicked.connect(self._on_add)
        self.fab.raise_()

        self.stack.addWidget(loading_page)
        self.stack.addWidget(self.list_page)
        self.setCentralWidget(self.stack)

        QShortcut(QKeySequence("F5"), self, activated=self._on_refresh)

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow, QStackedWidget {
                background-color: #fff;
            }
            QListWidget {
                border: none;
                padding-bottom: 50px;
            }
            #filaUsuario {
                background-color: #f9c2ff;
                border-radius: 5px;
            }
            #nombreUsuario {
                font-size: 14pt;
                font-weight: 700;
            }
            #loadingBar::chunk, #refreshBar::chunk {
                background-color: #2196F3;
            }
            #fab {
                background-color: #2196F3;
                color: white;
                border: none;
                border-radius: 30px;
                font-size: 20pt;
                font-weight: 700;
            }
            #fab:hover {
                background-color: #1976D2;
            }
            """
        )

    # ---------------------------------------------------------- eventos
    def _on_refresh(self) -> None:
        self.controller.refrescar()

    def _on_add(self) -> None:
        self.controller.agregar()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:  # pragma: no cover - interacción UI
        if obj is self.list_widget.viewport() and event.type() == QEvent.Type.Wheel:
            self._handle_pull(event.angleDelta().y())
        elif obj is self.list_page and event.type() == QEvent.Type.Resize:
            self._position_fab()
        return super().eventFilter(obj, event)

    def _handle_pull(self, delta_y: int) -> None:
        """Acumula el tirón hacia arriba estando al inicio de la lista."""

        scroll = self.list_widget.verticalScrollBar()
        if delta_y <= 0 or scroll.value() > scroll.minimum():
            self._pull_acumulado = 0
            return
        self._pull_acumulado += delta_y
        if self._pull_acumulado >= self.PULL_THRESHOLD:
            self._pull_acumulado = 0
            self.controller.refrescar()

    def showEvent(self, event) -> None:  # pragma: no cover - actualización visual
        super().showEvent(event)
        self._position_fab()

    def closeEvent(self, event) -> None:
        self.controller.cerrar()
        super().closeEvent(event)

    def _position_fab(self) -> None:
        x = self.list_page.width() - self.FAB_SIZE - self.FAB_MARGIN
        y = self.list_page.height() - self.FAB_SIZE - self.FAB_MARGIN
        self.fab.move(max(0, x), max(0, y))
        self.fab.raise_()

    # ------------------------------------------------------- renderizado
    def _render(self, estado: EstadoPantalla) -> None:
        if estado.fase is Fase.CARGANDO:
            self.stack.setCurrentIndex(self.PAGE_LOADING)
            return

        self.stack.setCurrentIndex(self.PAGE_LIST)
        self.refresh_bar.setVisible(estado.refrescando)
        self.refresh_button.setEnabled(not estado.refrescando)
        if estado.refrescando:
            self.statusBar().showMessage("Recargando usuarios...", 0)
        else:
            self.statusBar().showMessage(f"{len(estado.usuarios)} usuarios", 4000)

        if estado.usuarios is not self._usuarios_renderizados:
            self._populate_list(estado.usuarios)

    def _populate_list(self, usuarios: Tuple[User, ...]) -> None:
        self.list_widget.clear()
        for fila in construir_filas(usuarios, self.avatar_renderer):
            avatar = self.avatar_renderer.crear_widget(fila.avatar, self.imagenes)
            widget = _FilaWidget(fila, avatar)

            item = QListWidgetItem()
            item.setData(Qt.ItemDataRole.UserRole, fila.clave)
            item.setSizeHint(widget.sizeHint())
            self.list_widget.addItem(item)
            self.list_widget.setItemWidget(item, widget)

        self._usuarios_renderizados = usuarios
        self.list_widget.scrollToTop()

    def claves_visibles(self) -> List[str]:
        """Claves de las filas en el orden en que se muestran."""

        return [
            self.list_widget.item(row).data(Qt.ItemDataRole.UserRole)
            for row in range(self.list_widget.count())
        ]


__all__ = ["MainWindow"]
