"""Free-threading safe — scan 1000 docs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from numnums import Extractor

docs = [f"Doc {i}: [home](/{i}) ![badge](/{i}.svg) [next](/{i + 1})" for i in range(1000)]
extractor = Extractor()

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(extractor.links, docs))

print(f"Scanned {len(results)} documents in parallel")
print("First doc links:", [t.url for t in results[0].tokens])
print("Last doc links:", [t.url for t in results[-1].tokens])
