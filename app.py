# app.py
import logging
import sys
from PySide6 import QtCore, QtMultimedia, QtMultimediaWidgets, QtWidgets
from config import PlayerConfig
from core.time_offset import TimeOffsetPlayer
from ui.main_window import PlayerWindow
from ui.qt_host import QtMediaHost
from ui.themes import install_base_style


def _select_file_dialog(parent=None):
    dlg = QtWidgets.QFileDialog(parent)
    dlg.setWindowTitle("Select media file")
    dlg.setFileMode(QtWidgets.QFileDialog.ExistingFile)
    dlg.setNameFilters([
        "Media Files (*.mp4 *.mkv *.webm *.mov *.mp3 *.m4a *.wav *.ogg)",
        "All Files (*)",
    ])
    if dlg.exec() == QtWidgets.QDialog.Accepted:
        files = dlg.selectedFiles()
        return files[0] if files else None
    return None


def main(
    path=None,
    *,
    config_path: str | None = None,
    start: float | None = None,
    end: float | None = None,
    page: int | None = None,
    per_page_minutes: float | None = None,
):
    cfg = PlayerConfig.load(config_path)
    window = cfg.window_config(
        {"start": start, "end": end, "page": page, "per_page_minutes": per_page_minutes}
    )
    app = QtWidgets.QApplication(sys.argv)
    install_base_style(app)

    if not path:
        path = _select_file_dialog()
        if not path:
            return

    player = QtMultimedia.QMediaPlayer()
    audio = QtMultimedia.QAudioOutput()
    audio.setVolume(cfg.volume)
    player.setAudioOutput(audio)
    video = QtMultimediaWidgets.QVideoWidget()
    player.setVideoOutput(video)

    host = QtMediaHost(player)
    windowed = TimeOffsetPlayer(host, window)
    w = PlayerWindow(windowed, host, config=cfg, video_widget=video)
    w.resize(960, 600)
    w.show()
    player.setSource(QtCore.QUrl.fromLocalFile(path))
    app.exec()
    player.stop()

if __name__ == "__main__":
    import argparse
    p = argparse.ArgumentParser()
    p.add_argument("media_path", nargs="?")
    p.add_argument("--config")
    p.add_argument("--start", type=float)
    p.add_argument("--end", type=float)
    p.add_argument("--page", type=int)
    p.add_argument("--per-page-minutes", type=float)
    p.add_argument("--log-level", default="WARNING")
    args = p.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    main(
        args.media_path,
        config_path=args.config,
        start=args.start,
        end=args.end,
        page=args.page,
        per_page_minutes=args.per_page_minutes,
    )
