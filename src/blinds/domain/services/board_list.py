"""Board list generation for the wooden frame."""

from __future__ import annotations

import logging

from ..value_objects import FrameParameters, Piece, PieceKind, StructuralLayout

logger = logging.getLogger(__name__)

__all__ = ["BoardListGenerator"]


class BoardListGenerator:
    """Lists the boards needed for the frame and its supports.

    The vertical sides (stiles) run the full frame height. The top and
    bottom rails and every support fit between the stiles.
    """

    def boards(self, params: FrameParameters, layout: StructuralLayout) -> list[Piece]:
        """Generate the board pieces for a frame.

        Args:
            params: Frame parameters.
            layout: Structural layout; its support count is used.

        Returns:
            List of board pieces. Boards that would have no length on a
            degenerate frame are omitted.
        """
        inner = params.inner_width
        candidates = [
            Piece(
                length=params.height,
                face_width=params.slat_height,
                depth=params.slat_depth,
                quantity=2,
                label="Frame side",
                kind=PieceKind.FRAME_SIDE,
            ),
            Piece(
                length=inner,
                face_width=params.slat_height,
                depth=params.slat_depth,
                quantity=2,
                label="Frame rail",
                kind=PieceKind.FRAME_RAIL,
            ),
        ]
        if layout.additional_supports > 0:
            candidates.append(
                Piece(
                    length=inner,
                    face_width=params.slat_height,
                    depth=params.slat_depth,
                    quantity=layout.additional_supports,
                    label="Support",
                    kind=PieceKind.SUPPORT,
                )
            )

        boards = [piece for piece in candidates if piece.length > 0]
        for piece in candidates:
            if piece.length <= 0:
                logger.debug(
                    "Omitting %s: no length left on a %sx%s frame",
                    piece.label,
                    params.width,
                    params.height,
                )
        return boards
