"""Allocator for texture blocks in GS local memory."""

from dataclasses import dataclass, field
from typing import Optional

HEAP_SIZE = 178
NUM_SLOTS = 8
INITIAL_SIZE = 0xCF0
INITIAL_DBP = 0x3310
_NO_SMALLEST = 10_000_000


def _s16(value):
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _release(tex):
    if tex is not None:
        tex.gs_alloc_info = None


@dataclass(eq=False)
class GSAllocInfo:
    """One block of GS memory in the allocator's list."""

    frame_count_plus_one: int = 0
    dbp: int = 0
    size: int = 0
    commit_count: int = 0
    alloc_tex: object = field(default=None, repr=False)
    next: Optional["GSAllocInfo"] = field(default=None, repr=False)
    prev: Optional["GSAllocInfo"] = field(default=None, repr=False)

    def drop_commit(self):
        self.commit_count = (self.commit_count - 1) & 0xFF


class GSAllocator:
    """Keeps textures in GS memory, reusing blocks not drawn in the current frame.

    Textures are any objects with ``required_gs_mem`` and ``gs_alloc_info``
    attributes; the allocator clears ``gs_alloc_info`` when it evicts one.
    """

    def __init__(self, frame_count=0):
        self.frame_count = frame_count
        self.smallest_allocated = _NO_SMALLEST
        self.reset()

    def reset(self):
        """Forget every allocation and start with one free block."""
        self.slots = [None] * NUM_SLOTS
        heap = [GSAllocInfo() for _ in range(HEAP_SIZE)]
        for node, following in zip(heap, heap[1:]):
            node.next = following

        head, tail, mid = heap[0], heap[1], heap[2]
        self._free = heap[3]

        head.prev = None
        head.next = mid
        mid.prev = head
        mid.next = tail
        tail.prev = mid
        tail.next = None

        for end in (head, tail):
            end.size = 0
            end.dbp = 0
            end.alloc_tex = None
            end.frame_count_plus_one = -1

        mid.frame_count_plus_one = -1
        mid.size = INITIAL_SIZE
        mid.dbp = INITIAL_DBP
        mid.alloc_tex = None

        self._head = head
        self._tail = tail

    def commit(self, idx, tex):
        """Mark the block of ``tex`` as bound to slot ``idx`` (1..7)."""
        info = tex.gs_alloc_info
        if not 0 < idx < NUM_SLOTS or info is None:
            return
        if self.slots[idx] is not None:
            self.slots[idx].drop_commit()
        self.slots[idx] = info
        info.commit_count = (info.commit_count + 1) & 0xFF

    def uncommit(self, idx):
        """Release slot ``idx`` (1..7)."""
        if 0 < idx < NUM_SLOTS and self.slots[idx] is not None:
            self.slots[idx].drop_commit()
            self.slots[idx] = None

    def _clear_slots_of(self, node):
        for i, slot in enumerate(self.slots):
            if slot is node:
                node.drop_commit()
                self.slots[i] = None

    def _push_free(self, node):
        node.next = self._free
        self._free = node

    def reset_frame(self):
        """Drop all commits and merge blocks unused since the last frame."""
        fc = self.frame_count
        self.smallest_allocated = _NO_SMALLEST

        for i, slot in enumerate(self.slots):
            if slot is not None:
                slot.drop_commit()
                self.slots[i] = None

        cur = self._head.next
        nxt = cur.next
        while nxt is not None and fc <= cur.frame_count_plus_one:
            cur, nxt = nxt, nxt.next

        if cur.alloc_tex is not None:
            _release(cur.alloc_tex)
            cur.alloc_tex = None

        while nxt is not None and nxt.next is not None:
            while nxt.frame_count_plus_one < fc:
                if nxt.commit_count != 0:
                    self._clear_slots_of(nxt)
                stale = nxt
                _release(stale.alloc_tex)
                nxt = stale.next
                nxt.prev = cur
                cur.next = nxt
                cur.size = _s16(cur.size + stale.size)
                self._push_free(stale)
                if nxt.next is None:
                    return

            cur, nxt = nxt, nxt.next
            while nxt is not None and fc <= cur.frame_count_plus_one:
                cur, nxt = nxt, nxt.next
            if nxt is not None and cur.alloc_tex is not None:
                _release(cur.alloc_tex)
                cur.alloc_tex = None

    def allocate(self, tex):
        """Find GS memory for ``tex``; return its block, or None if nothing fits."""
        required = tex.required_gs_mem or 1
        if required <= self.smallest_allocated:
            block = self._first_fit(tex, required)
            if block is not None:
                return block
            if required < self.smallest_allocated:
                self.smallest_allocated = required
        return self._evict_fit(tex, required)

    def _first_fit(self, tex, required):
        fc = self.frame_count
        block = self._head.next
        if block.next is None:
            return None
        nxt = block.next
        while (fc <= block.frame_count_plus_one or block.size < required
               or block.commit_count != 0):
            if nxt.next is None:
                return None
            block, nxt = nxt, nxt.next

        block.frame_count_plus_one = fc + 1
        spare = self._free
        if required + 4 < block.size and spare is not None:
            self._free = spare.next
            spare.size = _s16(block.size - required)
            block.size = _s16(required)
            spare.prev = block
            spare.next = block.next
            spare.dbp = _s16(block.dbp + required)
            if block.next is not None:
                block.next.prev = spare
            block.next = spare
            spare.alloc_tex = None

        tex.gs_alloc_info = block
        _release(block.alloc_tex)
        block.alloc_tex = tex
        return block

    @staticmethod
    def _run_end(start, required):
        """Return the block after a run from ``start`` holding ``required``, and its size."""
        if start.next is None or start.commit_count != 0:
            return None, 0
        total = 0
        node = start
        while True:
            total += node.size
            after = node.next
            if total >= required:
                return after, total
            if after.next is None or after.commit_count != 0:
                return None, total
            node = after

    def _evict_fit(self, tex, required):
        before = self._tail.prev.prev
        if before is None:
            return None
        start = self._tail.prev
        while True:
            end, total = self._run_end(start, required)
            if end is not None:
                return self._claim(start, end, total, tex, required)
            start = before
            before = before.prev
            if before is None:
                return None

    def _claim(self, start, end, total, tex, required):
        _release(start.alloc_tex)
        tex.gs_alloc_info = start
        start.alloc_tex = tex
        start.frame_count_plus_one = self.frame_count + 1

        node = start.next
        while node is not end:
            _release(node.alloc_tex)
            if node.commit_count != 0:
                self._clear_slots_of(node)
            following = node.next
            self._push_free(node)
            node = following
        end.prev = start
        start.next = end

        spare = self._free
        if required + 4 < total and spare is not None:
            self._free = spare.next
            start.size = _s16(required)
            spare.size = _s16(total - required)
            spare.prev = start
            spare.next = end
            spare.alloc_tex = None
            end.prev = spare
            start.next = spare
            spare.dbp = _s16(start.dbp + required)
        else:
            start.size = _s16(total)
        return start

    def blocks(self):
        """Return the blocks between the list's sentinels, in address order."""
        out = []
        node = self._head.next
        while node is not None and node is not self._tail:
            out.append(node)
            node = node.next
        return out