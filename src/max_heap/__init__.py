from src.max_heap.max_heap import MaxHeap
from src.max_heap.topk import get_topk
